"""SQLAlchemy ORM models."""
import uuid
from datetime import datetime, timezone

from sqlalchemy import Column, DateTime, String

from device_inventory.infrastructure.database.base import Base


def generate_uuid() -> str:
    return str(uuid.uuid4())


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class Device(Base):
    __tablename__ = "devices"

    id = Column(String(36), primary_key=True, default=generate_uuid)
    name = Column(String(255), nullable=False)
    brand = Column(String(255), nullable=False, index=True)
    state = Column(String(20), nullable=False, index=True)
    creation_time = Column(DateTime(timezone=True), nullable=False, default=utc_now)
