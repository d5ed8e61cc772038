"""Database session dependency."""

from device_inventory.infrastructure.database.session import get_session

# one session per request, committed when the handler returns and rolled back on error
get_db_session = get_session

__all__ = ["get_db_session"]
