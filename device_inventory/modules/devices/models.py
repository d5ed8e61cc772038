"""Device domain models."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone
from enum import Enum
from typing import Optional

from device_inventory.db import models as orm


class DeviceState(str, Enum):
    AVAILABLE = "AVAILABLE"
    IN_USE = "IN_USE"
    INACTIVE = "INACTIVE"


def _as_utc(value: Optional[datetime]) -> Optional[datetime]:
    # SQLite drops the offset of timezone-aware columns
    if value is not None and value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


@dataclass(slots=True, frozen=True)
class Device:
    """Snapshot of a stored device.

    ``id`` and ``creation_time`` stay ``None`` until the record is first saved;
    the storage layer assigns both and never changes them afterwards.
    """

    name: str
    brand: str
    state: DeviceState
    id: Optional[str] = None
    creation_time: Optional[datetime] = None

    @classmethod
    def from_orm(cls, instance: orm.Device) -> "Device":
        return cls(
            id=str(instance.id),
            name=instance.name,
            brand=instance.brand,
            state=DeviceState(instance.state),
            creation_time=_as_utc(instance.creation_time),
        )


@dataclass(slots=True, frozen=True)
class DeviceFilter:
    """Listing constraints; ``None`` leaves the field unconstrained."""

    brand: Optional[str] = None
    state: Optional[DeviceState] = None


@dataclass(slots=True)
class DeviceCreateInput:
    name: str
    brand: str
    state: DeviceState


# Sentinel used to differentiate between "not provided" and explicit None.
UNSET = object()


@dataclass(slots=True)
class DeviceUpdateInput:
    name: str | object = UNSET
    brand: str | object = UNSET
    state: DeviceState | object = UNSET

    def changes(self) -> dict[str, object]:
        values = {"name": self.name, "brand": self.brand, "state": self.state}
        return {field: value for field, value in values.items() if value is not UNSET}
