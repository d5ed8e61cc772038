"""SQLAlchemy-backed repository implementations."""

from .device_repository import SqlDeviceRepository

__all__ = [
    "SqlDeviceRepository",
]
