"""SQLAlchemy powered repository for device persistence."""

from __future__ import annotations

from typing import Sequence

from sqlalchemy import Select, select
from sqlalchemy.ext.asyncio import AsyncSession

from device_inventory.db.models import Device as DeviceModel, generate_uuid, utc_now
from device_inventory.modules.devices.models import Device, DeviceState


class SqlDeviceRepository:
    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def find_by_id(self, device_id: str) -> Device | None:
        model = await self._fetch_model(device_id)
        return Device.from_orm(model) if model else None

    async def find_all(self) -> Sequence[Device]:
        return await self._list(select(DeviceModel))

    async def find_by_brand(self, brand: str) -> Sequence[Device]:
        return await self._list(select(DeviceModel).where(DeviceModel.brand == brand))

    async def find_by_state(self, state: DeviceState) -> Sequence[Device]:
        return await self._list(select(DeviceModel).where(DeviceModel.state == state.value))

    async def find_by_brand_and_state(self, brand: str, state: DeviceState) -> Sequence[Device]:
        stmt = (
            select(DeviceModel)
            .where(DeviceModel.brand == brand)
            .where(DeviceModel.state == state.value)
        )
        return await self._list(stmt)

    async def save(self, device: Device) -> Device:
        model = await self._fetch_model(device.id) if device.id else None
        if model is None:
            model = DeviceModel(
                id=device.id or generate_uuid(),
                name=device.name,
                brand=device.brand,
                state=device.state.value,
                creation_time=device.creation_time or utc_now(),
            )
            self._session.add(model)
        else:
            model.name = device.name
            model.brand = device.brand
            model.state = device.state.value

        await self._session.flush()
        await self._session.refresh(model)
        return Device.from_orm(model)

    async def delete(self, device: Device) -> None:
        model = await self._fetch_model(device.id) if device.id else None
        if model is None:
            return
        await self._session.delete(model)
        await self._session.flush()

    async def _list(self, stmt: Select) -> list[Device]:
        result = await self._session.execute(stmt.order_by(DeviceModel.creation_time))
        return [Device.from_orm(model) for model in result.scalars().all()]

    async def _fetch_model(self, device_id: str) -> DeviceModel | None:
        stmt = select(DeviceModel).where(DeviceModel.id == device_id)
        result = await self._session.execute(stmt)
        return result.scalar_one_or_none()
