"""Domain service orchestrating device related workflows."""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from typing import TYPE_CHECKING

from .guard import check_delete_allowed, check_update_allowed
from .models import Device, DeviceCreateInput, DeviceFilter, DeviceUpdateInput
from .repository import DeviceRepository
from .results import DeviceFailure, DeviceResult

if TYPE_CHECKING:
    from sqlalchemy.ext.asyncio import AsyncSession

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class DeviceService:
    """Applies the device lifecycle rules on top of a repository.

    Domain failures (missing device, device in use) come back as failed
    ``DeviceResult`` values; storage errors propagate unchanged.
    """

    repository: DeviceRepository

    @classmethod
    def with_session(cls, session: AsyncSession) -> "DeviceService":
        # the SQL repository imports this package, resolve it at call time
        from device_inventory.infrastructure.database.repositories import SqlDeviceRepository

        return cls(SqlDeviceRepository(session))

    async def create_device(self, payload: DeviceCreateInput) -> DeviceResult[Device]:
        device = await self.repository.save(
            Device(name=payload.name, brand=payload.brand, state=payload.state)
        )
        logger.info("Created device %s (%s / %s)", device.id, device.brand, device.name)
        return DeviceResult.success(device)

    async def get_device(self, device_id: str) -> DeviceResult[Device]:
        device = await self.repository.find_by_id(device_id)
        if device is None:
            return self._missing(device_id)
        return DeviceResult.success(device)

    async def list_devices(self, device_filter: DeviceFilter | None = None) -> list[Device]:
        device_filter = device_filter or DeviceFilter()
        brand, state = device_filter.brand, device_filter.state

        if brand is not None and state is not None:
            devices = await self.repository.find_by_brand_and_state(brand, state)
        elif brand is not None:
            devices = await self.repository.find_by_brand(brand)
        elif state is not None:
            devices = await self.repository.find_by_state(state)
        else:
            devices = await self.repository.find_all()
        return list(devices)

    async def update_device(self, device_id: str, payload: DeviceUpdateInput) -> DeviceResult[Device]:
        current = await self.repository.find_by_id(device_id)
        if current is None:
            return self._missing(device_id)

        rejection = check_update_allowed(current.state, name=payload.name, brand=payload.brand)
        if rejection is not None:
            logger.warning("Rejected update of device %s: %s", device_id, rejection.message)
            return DeviceResult.fail(rejection)

        changes = payload.changes()
        updated = await self.repository.save(replace(current, **changes))
        logger.info("Updated device %s fields %s", device_id, sorted(changes))
        return DeviceResult.success(updated)

    async def partial_update_device(
        self, device_id: str, payload: DeviceUpdateInput
    ) -> DeviceResult[Device]:
        return await self.update_device(device_id, payload)

    async def delete_device(self, device_id: str) -> DeviceResult[None]:
        current = await self.repository.find_by_id(device_id)
        if current is None:
            return self._missing(device_id)

        rejection = check_delete_allowed(current.state)
        if rejection is not None:
            logger.warning("Rejected delete of device %s: %s", device_id, rejection.message)
            return DeviceResult.fail(rejection)

        await self.repository.delete(current)
        logger.info("Deleted device %s", device_id)
        return DeviceResult.success()

    @staticmethod
    def _missing(device_id: str) -> DeviceResult:
        logger.warning("Device %s not found", device_id)
        return DeviceResult.fail(DeviceFailure.not_found(device_id))
