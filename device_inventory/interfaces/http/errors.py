"""Rendering of domain failures and request validation errors as problem documents."""

from __future__ import annotations

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from device_inventory.modules.devices import DeviceErrorKind, DeviceFailure
from device_inventory.schemas import ProblemDetail

logger = logging.getLogger(__name__)

PROBLEM_CONTENT_TYPE = "application/problem+json"
ERROR_TYPE_BASE = "https://api.devices.com/errors"

_FAILURE_MAPPING: dict[DeviceErrorKind, tuple[int, str, str]] = {
    DeviceErrorKind.NOT_FOUND: (status.HTTP_404_NOT_FOUND, "Device Not Found", "not-found"),
    DeviceErrorKind.DEVICE_IN_USE: (status.HTTP_409_CONFLICT, "Device In Use", "device-in-use"),
}

_REQUIRED_MESSAGES = {
    "name": "Name is required",
    "brand": "Brand is required",
    "state": "State is required",
}
_BLANK_ERROR_TYPES = {"missing", "string_too_short"}


def problem_response(
    status_code: int,
    title: str,
    slug: str,
    detail: str,
    *,
    instance: str | None = None,
    errors: dict[str, str] | None = None,
) -> JSONResponse:
    problem = ProblemDetail(
        type=f"{ERROR_TYPE_BASE}/{slug}",
        title=title,
        status=status_code,
        detail=detail,
        instance=instance,
        errors=errors,
    )
    return JSONResponse(
        status_code=status_code,
        content=problem.model_dump(exclude_none=True),
        media_type=PROBLEM_CONTENT_TYPE,
    )


def failure_response(failure: DeviceFailure, request: Request | None = None) -> JSONResponse:
    status_code, title, slug = _FAILURE_MAPPING[failure.kind]
    return problem_response(
        status_code,
        title,
        slug,
        failure.message,
        instance=request.url.path if request is not None else None,
    )


def _field_name(location: tuple) -> str:
    # drop the "body" / "query" prefix FastAPI puts in front of the field path
    parts = [str(part) for part in location[1:]] or [str(part) for part in location]
    return ".".join(parts)


def _error_message(field: str, error: dict) -> str:
    required = _REQUIRED_MESSAGES.get(field)
    if required is not None and (error.get("type") in _BLANK_ERROR_TYPES or error.get("input", "") is None):
        return required
    return error.get("msg", "invalid value")


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    errors: dict[str, str] = {}
    for error in exc.errors():
        field = _field_name(tuple(error.get("loc", ())))
        errors.setdefault(field, _error_message(field, error))
    logger.info("Rejected %s %s: %s", request.method, request.url.path, errors)
    return problem_response(
        status.HTTP_400_BAD_REQUEST,
        "Validation Error",
        "validation",
        "Validation failed",
        instance=request.url.path,
        errors=errors,
    )


async def value_error_handler(request: Request, exc: ValueError) -> JSONResponse:
    logger.warning("Bad request %s %s: %s", request.method, request.url.path, exc)
    return problem_response(
        status.HTTP_400_BAD_REQUEST,
        "Bad Request",
        "bad-request",
        str(exc),
        instance=request.url.path,
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(ValueError, value_error_handler)


__all__ = [
    "failure_response",
    "problem_response",
    "register_exception_handlers",
    "validation_exception_handler",
    "value_error_handler",
]
