"""Pydantic schemas used across the project."""
from datetime import datetime, timezone
from typing import Any, Optional

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_serializer

from device_inventory.modules.devices import DeviceCreateInput, DeviceState, DeviceUpdateInput


class _DeviceFields(BaseModel):
    model_config = ConfigDict(str_strip_whitespace=True)


class DeviceBase(_DeviceFields):
    name: str = Field(..., min_length=1, examples=["iPhone 15"])
    brand: str = Field(..., min_length=1, examples=["Apple"])
    state: DeviceState = Field(..., examples=[DeviceState.AVAILABLE])


class DeviceCreate(DeviceBase):
    def to_input(self) -> DeviceCreateInput:
        return DeviceCreateInput(name=self.name, brand=self.brand, state=self.state)


class DeviceFullUpdate(DeviceBase):
    """PUT body: every field is required."""

    def to_input(self) -> DeviceUpdateInput:
        return DeviceUpdateInput(name=self.name, brand=self.brand, state=self.state)


class DevicePartialUpdate(_DeviceFields):
    """PATCH body: omitted or null fields are left unchanged."""

    name: Optional[str] = Field(default=None, min_length=1)
    brand: Optional[str] = Field(default=None, min_length=1)
    state: Optional[DeviceState] = None

    def to_input(self) -> DeviceUpdateInput:
        return DeviceUpdateInput(**self.model_dump(exclude_none=True))


class DeviceResponse(BaseModel):
    id: str
    name: str
    brand: str
    state: DeviceState
    creation_time: datetime = Field(
        validation_alias=AliasChoices("creation_time", "creationTime"),
        serialization_alias="creationTime",
    )

    model_config = ConfigDict(from_attributes=True)

    @field_serializer("creation_time")
    def _serialize_creation_time(self, value: datetime) -> str:
        if value.tzinfo is None:
            value = value.replace(tzinfo=timezone.utc)
        return value.astimezone(timezone.utc).isoformat().replace("+00:00", "Z")


class ProblemDetail(BaseModel):
    type: str
    title: str
    status: int
    detail: str
    instance: Optional[str] = None
    errors: Optional[dict[str, Any]] = None
