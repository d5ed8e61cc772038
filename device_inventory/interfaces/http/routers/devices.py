"""Device management endpoints."""

from typing import Optional

from fastapi import APIRouter, Depends, Query, Request, Response, status

from device_inventory.interfaces.http.deps import get_device_service
from device_inventory.interfaces.http.errors import failure_response
from device_inventory.modules.devices import DeviceFilter, DeviceService, DeviceState
from device_inventory.schemas import (
    DeviceCreate,
    DeviceFullUpdate,
    DevicePartialUpdate,
    DeviceResponse,
    ProblemDetail,
)

router = APIRouter()

_NOT_FOUND = {status.HTTP_404_NOT_FOUND: {"model": ProblemDetail, "description": "Device not found"}}
_IN_USE = {status.HTTP_409_CONFLICT: {"model": ProblemDetail, "description": "Device is in use"}}
_INVALID = {status.HTTP_400_BAD_REQUEST: {"model": ProblemDetail, "description": "Invalid request data"}}


def _to_schema(device) -> DeviceResponse:
    return DeviceResponse.model_validate(device)


@router.post(
    "",
    response_model=DeviceResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create a new device",
    responses=_INVALID,
)
async def create_device(
    payload: DeviceCreate,
    service: DeviceService = Depends(get_device_service),
):
    result = await service.create_device(payload.to_input())
    return _to_schema(result.unwrap())


@router.get("", response_model=list[DeviceResponse], summary="Get all devices", responses=_INVALID)
async def list_devices(
    brand: Optional[str] = Query(default=None, description="Filter by brand"),
    state: Optional[DeviceState] = Query(default=None, description="Filter by state"),
    service: DeviceService = Depends(get_device_service),
):
    devices = await service.list_devices(DeviceFilter(brand=brand, state=state))
    return [_to_schema(device) for device in devices]


@router.get(
    "/{device_id}",
    response_model=DeviceResponse,
    summary="Get device by ID",
    responses=_NOT_FOUND,
)
async def get_device(
    device_id: str,
    request: Request,
    service: DeviceService = Depends(get_device_service),
):
    result = await service.get_device(device_id)
    if result.is_failure():
        return failure_response(result.failure, request)
    return _to_schema(result.value)


@router.put(
    "/{device_id}",
    response_model=DeviceResponse,
    summary="Update device",
    description="Fully updates a device. Name and brand cannot change while the device is in use.",
    responses={**_INVALID, **_NOT_FOUND, **_IN_USE},
)
async def update_device(
    device_id: str,
    payload: DeviceFullUpdate,
    request: Request,
    service: DeviceService = Depends(get_device_service),
):
    result = await service.update_device(device_id, payload.to_input())
    if result.is_failure():
        return failure_response(result.failure, request)
    return _to_schema(result.value)


@router.patch(
    "/{device_id}",
    response_model=DeviceResponse,
    summary="Partially update device",
    description="Updates the supplied fields only. Name and brand cannot change while the device is in use.",
    responses={**_INVALID, **_NOT_FOUND, **_IN_USE},
)
async def partial_update_device(
    device_id: str,
    payload: DevicePartialUpdate,
    request: Request,
    service: DeviceService = Depends(get_device_service),
):
    result = await service.partial_update_device(device_id, payload.to_input())
    if result.is_failure():
        return failure_response(result.failure, request)
    return _to_schema(result.value)


@router.delete(
    "/{device_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    summary="Delete device",
    responses={**_NOT_FOUND, **_IN_USE},
)
async def delete_device(
    device_id: str,
    request: Request,
    service: DeviceService = Depends(get_device_service),
):
    result = await service.delete_device(device_id)
    if result.is_failure():
        return failure_response(result.failure, request)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
