"""
Test configuration and fixtures for the back office
"""

import os
from datetime import UTC, datetime, timedelta
from typing import List, Optional, Set
from unittest.mock import patch

import pytest

from src.application.interfaces.notifications import (
    NotificationLevel,
    NotificationService,
)
from src.application.use_cases.board_coordinator_use_case import BoardCoordinator
from src.application.use_cases.category_management_use_case import (
    CategoryManagementUseCase,
)
from src.application.use_cases.menu_item_management_use_case import (
    MenuItemManagementUseCase,
)
from src.application.use_cases.order_lifecycle_use_case import OrderLifecycleUseCase
from src.application.use_cases.table_layout_use_case import TableLayoutUseCase
from src.config import reset_config
from src.domain.repositories.record_store import Collection
from src.infrastructure.repositories.in_memory_record_store import InMemoryRecordStore
from src.infrastructure.services.notification_service import StaticConfirmationService
from src.infrastructure.utilities.exceptions import PersistenceError

FIXED_NOW = datetime(2024, 5, 17, 12, 0, 0, tzinfo=UTC)


# Mock environment variables for testing
@pytest.fixture(autouse=True)
def mock_env():
    """Mock environment variables for testing"""
    test_env = {
        "ENVIRONMENT": "test",
        "LOG_LEVEL": "DEBUG",
        "RECORD_STORE_BACKEND": "memory",
        "DATABASE_URL": "sqlite:///:memory:",
        "BOARD_TICK_SECONDS": "0.05",
    }

    with patch.dict(os.environ, test_env, clear=True):
        reset_config()
        yield test_env
    reset_config()


class FakeClock:
    """Callable clock that only moves when told to"""

    def __init__(self, now: datetime = FIXED_NOW):
        self.now = now

    def __call__(self) -> datetime:
        return self.now

    def advance(self, seconds: float) -> datetime:
        self.now = self.now + timedelta(seconds=seconds)
        return self.now


class RecordingNotificationService(NotificationService):
    """Keeps every toast so tests can count them"""

    def __init__(self):
        self.messages: List[tuple] = []

    def notify(self, level: NotificationLevel, message: str) -> None:
        self.messages.append((NotificationLevel(level), message))

    @property
    def successes(self) -> List[str]:
        return [m for level, m in self.messages if level is NotificationLevel.SUCCESS]

    @property
    def errors(self) -> List[str]:
        return [m for level, m in self.messages if level is NotificationLevel.ERROR]


class FlakyRecordStore(InMemoryRecordStore):
    """In-memory store that fails chosen operations and records every call"""

    def __init__(self, seed=None):
        super().__init__(seed=seed)
        self.fail_operations: Set[str] = set()
        self.fail_ids: Optional[Set[int]] = None
        self.calls: List[tuple] = []

    def _maybe_fail(self, operation: str, record_id=None):
        self.calls.append((operation, record_id))
        if operation in self.fail_operations and (
            self.fail_ids is None or record_id in self.fail_ids
        ):
            raise PersistenceError(f"{operation} failed", operation=operation)

    def calls_for(self, operation: str) -> List[tuple]:
        return [call for call in self.calls if call[0] == operation]

    async def list(self, collection, filters=None, sort=None):
        self._maybe_fail("list")
        return await super().list(collection, filters, sort)

    async def create(self, collection, fields):
        self._maybe_fail("create")
        return await super().create(collection, fields)

    async def update(self, collection, record_id, fields):
        self._maybe_fail("update", record_id)
        return await super().update(collection, record_id, fields)

    async def delete(self, collection, record_id):
        self._maybe_fail("delete", record_id)
        return await super().delete(collection, record_id)


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def notifier():
    return RecordingNotificationService()


@pytest.fixture
def confirm_yes():
    return StaticConfirmationService(True)


@pytest.fixture
def confirm_no():
    return StaticConfirmationService(False)


@pytest.fixture
def store():
    return FlakyRecordStore()


@pytest.fixture
def order_lifecycle(store, notifier, confirm_yes, clock):
    return OrderLifecycleUseCase(store, notifier, confirm_yes, clock=clock)


@pytest.fixture
def board(order_lifecycle):
    return BoardCoordinator(order_lifecycle)


@pytest.fixture
def categories(store, notifier, confirm_yes, clock):
    return CategoryManagementUseCase(store, notifier, confirm_yes, clock=clock)


@pytest.fixture
def menu_items(store, categories, notifier, confirm_yes, clock):
    return MenuItemManagementUseCase(store, categories, notifier, confirm_yes, clock=clock)


@pytest.fixture
def table_layout(store, notifier, confirm_yes, clock):
    return TableLayoutUseCase(store, notifier, confirm_yes, clock=clock)


async def seed_categories(store, *names: str) -> None:
    """Store categories with display_order following the given order"""
    for position, name in enumerate(names, start=1):
        await store.create(
            Collection.CATEGORY,
            {"name": name, "display_order": position, "item_count": 0, "is_active": True},
        )
    # Setup writes are not part of what the tests measure
    store.calls.clear()
