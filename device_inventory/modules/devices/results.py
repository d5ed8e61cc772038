"""Result values returned by the device service instead of raising."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Generic, Optional, TypeVar

T = TypeVar("T")


class DeviceErrorKind(str, Enum):
    NOT_FOUND = "not_found"
    DEVICE_IN_USE = "device_in_use"


@dataclass(slots=True, frozen=True)
class DeviceFailure:
    kind: DeviceErrorKind
    message: str

    @classmethod
    def not_found(cls, device_id: str) -> "DeviceFailure":
        return cls(DeviceErrorKind.NOT_FOUND, f"Device not found with id: {device_id}")

    @classmethod
    def in_use(cls, message: str) -> "DeviceFailure":
        return cls(DeviceErrorKind.DEVICE_IN_USE, message)


@dataclass(slots=True, frozen=True)
class DeviceResult(Generic[T]):
    """Either a value or a failure, never both."""

    value: Optional[T] = None
    failure: Optional[DeviceFailure] = None

    @classmethod
    def success(cls, value: Optional[T] = None) -> "DeviceResult[T]":
        return cls(value=value)

    @classmethod
    def fail(cls, failure: DeviceFailure) -> "DeviceResult[T]":
        return cls(failure=failure)

    def is_success(self) -> bool:
        return self.failure is None

    def is_failure(self) -> bool:
        return self.failure is not None

    def unwrap(self) -> T:
        if self.failure is not None:
            raise ValueError(f"unwrap() on failed result: {self.failure.message}")
        return self.value  # type: ignore[return-value]
