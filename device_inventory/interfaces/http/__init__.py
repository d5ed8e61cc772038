from fastapi import APIRouter

from device_inventory.interfaces.http.routers import devices


def create_api_router(prefix: str = "") -> APIRouter:
    router = APIRouter(prefix=prefix)
    router.include_router(devices.router, prefix="/devices", tags=["Devices"])
    return router


__all__ = [
    "create_api_router",
]
