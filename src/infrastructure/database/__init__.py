"""
Database Infrastructure

Contains the SQLAlchemy model and engine/session management.
"""

from .models import Base, StoredRecord
from .operations import DatabaseManager

__all__ = ["Base", "DatabaseManager", "StoredRecord"]
