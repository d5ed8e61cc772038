"""Logging setup applied when the application starts."""

from __future__ import annotations

import logging

from device_inventory.core.config import Settings


def configure_logging(settings: Settings) -> None:
    level = logging.DEBUG if settings.debug else settings.log_level
    logging.basicConfig(level=level, format=settings.logging.format, force=True)
    # SQL echo is controlled by the database settings, keep the engine logger quiet otherwise
    if not settings.database.echo:
        logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)


__all__ = ["configure_logging"]
