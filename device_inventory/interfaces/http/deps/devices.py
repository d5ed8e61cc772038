"""Device related dependency providers."""

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from device_inventory.modules.devices import DeviceService

from .database import get_db_session


def get_device_service(db: AsyncSession = Depends(get_db_session)) -> DeviceService:
    return DeviceService.with_session(db)


__all__ = ["get_device_service"]
