"""Repository protocol for device persistence operations."""

from __future__ import annotations

from typing import Protocol, Sequence

from .models import Device, DeviceState


class DeviceRepository(Protocol):
    async def find_by_id(self, device_id: str) -> Device | None:
        ...

    async def find_all(self) -> Sequence[Device]:
        ...

    async def find_by_brand(self, brand: str) -> Sequence[Device]:
        ...

    async def find_by_state(self, state: DeviceState) -> Sequence[Device]:
        ...

    async def find_by_brand_and_state(self, brand: str, state: DeviceState) -> Sequence[Device]:
        ...

    async def save(self, device: Device) -> Device:
        """Insert a new device or update an existing one, returning the stored record."""
        ...

    async def delete(self, device: Device) -> None:
        ...
