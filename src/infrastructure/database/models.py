# pylint: disable=too-few-public-methods
"""
SQLAlchemy database models for the back office

One generic table holds every collection: the record fields live in a JSON
column so the schema mirrors the hosted record API.
"""

from datetime import datetime
from typing import Any, Dict, Optional

from sqlalchemy import JSON, DateTime, Integer, String
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column
from sqlalchemy.sql import func

from src.infrastructure.utilities.constants import DatabaseSettings


class Base(DeclarativeBase):
    """Declarative base"""


class StoredRecord(Base):
    """A record in one of the named collections"""
    __tablename__ = DatabaseSettings.RECORDS_TABLE

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    collection: Mapped[str] = mapped_column(String(50), index=True, nullable=False)
    data: Mapped[Dict[str, Any]] = mapped_column(JSON, nullable=False, default=dict)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), server_default=func.now())
    updated_at: Mapped[Optional[datetime]] = mapped_column(
        DateTime(timezone=True),
        onupdate=func.now(),
        nullable=True
    )

    def to_record(self) -> Dict[str, Any]:
        return {**(self.data or {}), "id": self.id}
