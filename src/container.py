"""
Dependency container for the back office.

Builds the record store selected by configuration and wires every use case
to it once per process.
"""

import logging
import threading
from typing import Optional

from src.application.services.board_ticker import BoardTicker, TickCallback
from src.application.use_cases.board_coordinator_use_case import BoardCoordinator
from src.application.use_cases.category_management_use_case import (
    CategoryManagementUseCase,
)
from src.application.use_cases.customer_directory_use_case import (
    CustomerDirectoryUseCase,
)
from src.application.use_cases.menu_item_management_use_case import (
    MenuItemManagementUseCase,
)
from src.application.use_cases.operator_use_case import Clock
from src.application.use_cases.order_analytics_use_case import OrderAnalyticsUseCase
from src.application.use_cases.order_lifecycle_use_case import OrderLifecycleUseCase
from src.application.use_cases.table_layout_use_case import TableLayoutUseCase
from src.config import Settings, get_config
from src.domain.entities.record_fields import utc_now
from src.domain.repositories.record_store import RecordStore
from src.infrastructure.database.operations import DatabaseManager
from src.infrastructure.repositories.http_record_store import HttpRecordStore
from src.infrastructure.repositories.in_memory_record_store import InMemoryRecordStore
from src.infrastructure.repositories.sample_data import sample_records
from src.infrastructure.repositories.sqlalchemy_record_store import SQLAlchemyRecordStore
from src.infrastructure.services.notification_service import InMemoryNotificationService
from src.infrastructure.utilities.constants import RecordStoreSettings

logger = logging.getLogger(__name__)


class Container:
    """Holds the shared store, notification channel and use cases"""

    def __init__(
        self,
        config: Optional[Settings] = None,
        record_store: Optional[RecordStore] = None,
        clock: Clock = utc_now,
    ):
        self.config = config or get_config()
        self.database: Optional[DatabaseManager] = None
        self.record_store = record_store or self._build_record_store()
        self.notifications = InMemoryNotificationService()

        self.orders = OrderLifecycleUseCase(self.record_store, self.notifications, clock=clock)
        self.board = BoardCoordinator(self.orders)
        self.categories = CategoryManagementUseCase(
            self.record_store, self.notifications, clock=clock
        )
        self.menu_items = MenuItemManagementUseCase(
            self.record_store, self.categories, self.notifications, clock=clock
        )
        self.tables = TableLayoutUseCase(self.record_store, self.notifications, clock=clock)
        self.customers = CustomerDirectoryUseCase(self.record_store, self.notifications)
        self.analytics = OrderAnalyticsUseCase(self.orders, self.menu_items)

    def _build_record_store(self) -> RecordStore:
        backend = self.config.record_store_backend.lower()
        logger.info("🗄️ RECORD STORE BACKEND: %s", backend)

        if backend == RecordStoreSettings.MEMORY_BACKEND:
            seed = sample_records() if self.config.seed_sample_data else None
            return InMemoryRecordStore(seed=seed)

        if backend == RecordStoreSettings.SQLALCHEMY_BACKEND:
            self.database = DatabaseManager(self.config.database_url)
            self.database.init_db()
            return SQLAlchemyRecordStore(self.database)

        if backend == RecordStoreSettings.HTTP_BACKEND:
            return HttpRecordStore(
                self.config.record_store_url,
                project_id=self.config.record_store_project_id,
                public_key=self.config.record_store_public_key,
                timeout=self.config.http_timeout_seconds,
            )

        raise ValueError(f"Unknown record store backend: {backend}")

    async def load_all(self) -> None:
        """Fill every in-process collection from the store"""
        await self.categories.load_categories()
        await self.menu_items.load_items()
        await self.orders.load_orders()
        await self.tables.load_tables()

    def board_ticker(self, on_tick: TickCallback) -> BoardTicker:
        return BoardTicker(self.orders, on_tick, interval=self.config.board_tick_seconds)

    async def aclose(self) -> None:
        if isinstance(self.record_store, HttpRecordStore):
            await self.record_store.aclose()
        if self.database is not None:
            self.database.dispose()


_container: Optional[Container] = None
_container_lock = threading.Lock()


def get_container() -> Container:
    """Get the global container instance"""
    global _container
    if _container is None:
        with _container_lock:
            if _container is None:
                _container = Container()
    return _container


def set_container(container: Optional[Container]) -> None:
    """Replace (or with None, drop) the global container"""
    global _container
    with _container_lock:
        _container = container
