"""Lifecycle rules deciding whether a device may be changed or removed."""

from __future__ import annotations

from typing import Optional

from .models import UNSET, DeviceState
from .results import DeviceFailure

UPDATE_IN_USE_MESSAGE = "Cannot update name or brand of device that is in use"
DELETE_IN_USE_MESSAGE = "Cannot delete device that is in use"


def check_update_allowed(
    current_state: DeviceState,
    name: object = UNSET,
    brand: object = UNSET,
) -> Optional[DeviceFailure]:
    """Return a failure when the proposed name/brand change is not permitted.

    State changes alone are always allowed.
    """
    if current_state is DeviceState.IN_USE and (name is not UNSET or brand is not UNSET):
        return DeviceFailure.in_use(UPDATE_IN_USE_MESSAGE)
    return None


def check_delete_allowed(current_state: DeviceState) -> Optional[DeviceFailure]:
    if current_state is DeviceState.IN_USE:
        return DeviceFailure.in_use(DELETE_IN_USE_MESSAGE)
    return None
