"""Device inventory domain: records, lifecycle rules and service."""

from .guard import check_delete_allowed, check_update_allowed
from .models import (
    UNSET,
    Device,
    DeviceCreateInput,
    DeviceFilter,
    DeviceState,
    DeviceUpdateInput,
)
from .repository import DeviceRepository
from .results import DeviceErrorKind, DeviceFailure, DeviceResult
from .service import DeviceService

__all__ = [
    "UNSET",
    "Device",
    "DeviceCreateInput",
    "DeviceFilter",
    "DeviceState",
    "DeviceUpdateInput",
    "DeviceRepository",
    "DeviceErrorKind",
    "DeviceFailure",
    "DeviceResult",
    "DeviceService",
    "check_delete_allowed",
    "check_update_allowed",
]
