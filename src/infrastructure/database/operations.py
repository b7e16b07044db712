"""
Database engine and session management
"""

import logging
from pathlib import Path
from typing import Any, Optional

from sqlalchemy import Engine, create_engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from src.infrastructure.database.models import Base
from src.infrastructure.utilities.constants import DatabaseSettings, RecordStoreSettings

logger = logging.getLogger(__name__)


class DatabaseManager:
    """Owns the engine and session factory for one database URL"""

    def __init__(self, database_url: str, echo: bool = False):
        self.database_url = database_url
        self.echo = echo
        self._engine: Optional[Engine] = None
        self._session_factory: Optional[sessionmaker] = None

    def get_engine(self) -> Engine:
        """Get database engine with proper configuration"""
        if self._engine is None:
            self._engine = self._create_engine()
        return self._engine

    def _create_engine(self) -> Engine:
        engine_kwargs: dict[str, Any] = {"echo": self.echo}

        if self.database_url.startswith("sqlite"):
            engine_kwargs["connect_args"] = {
                "check_same_thread": False,
                "timeout": DatabaseSettings.CONNECTION_TIMEOUT_SECONDS,
            }
            if ":memory:" in self.database_url or self.database_url == "sqlite://":
                # A single shared connection keeps the in-memory database alive
                engine_kwargs["poolclass"] = StaticPool
            else:
                self._ensure_sqlite_directory()
        else:
            engine_kwargs.update({
                "pool_pre_ping": True,
                "pool_recycle": DatabaseSettings.POOL_RECYCLE_SECONDS,
            })

        return create_engine(self.database_url, **engine_kwargs)

    def _ensure_sqlite_directory(self) -> None:
        db_path = self.database_url.replace(RecordStoreSettings.SQLITE_PREFIX, "", 1)
        Path(db_path).parent.mkdir(parents=True, exist_ok=True)

    def get_session(self) -> Session:
        """Open a new session"""
        if self._session_factory is None:
            self._session_factory = sessionmaker(bind=self.get_engine(), expire_on_commit=False)
        return self._session_factory()

    def init_db(self) -> None:
        """Create the records table if it does not exist"""
        Base.metadata.create_all(self.get_engine())
        logger.info("✅ DATABASE READY: %s", self.database_url.split("://")[0])

    def dispose(self) -> None:
        if self._engine is not None:
            self._engine.dispose()
            self._engine = None
            self._session_factory = None
