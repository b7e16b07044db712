"""
Menu Item Management Use Case

Menu item CRUD, availability toggles and the dashboard metrics. Category
item counts are recomputed from the item list after every change and written
back as separate calls; a failed count update leaves the item change in
place and the counts are reconciled by the next sync.
"""

import asyncio
from typing import List, Optional, Sequence

from src.application.derived_views import filter_menu_items, item_counts, menu_metrics
from src.application.dtos.catalog_dtos import MenuItemDraft
from src.application.dtos.operation_result import OperationResult
from src.application.dtos.stats_dtos import MenuMetrics
from src.application.interfaces.notifications import (
    ConfirmationService,
    NotificationService,
)
from src.application.use_cases.category_management_use_case import (
    CategoryManagementUseCase,
)
from src.application.use_cases.operator_use_case import Clock, OperatorUseCase
from src.domain.entities.menu_entity import MenuItem
from src.domain.entities.record_fields import format_datetime, utc_now
from src.domain.repositories.record_store import Collection, RecordStore, SortSpec
from src.infrastructure.utilities.exceptions import (
    BackOfficeError,
    MenuItemNotFoundError,
    NotFoundError,
    PersistenceError,
    ValidationError,
)


class MenuItemManagementUseCase(OperatorUseCase):
    """Use case for menu items"""

    def __init__(
        self,
        record_store: RecordStore,
        category_management: CategoryManagementUseCase,
        notification_service: NotificationService,
        confirmation_service: Optional[ConfirmationService] = None,
        clock: Clock = utc_now,
    ):
        super().__init__(notification_service, confirmation_service, clock)
        self._record_store = record_store
        self._categories = category_management
        self.items: List[MenuItem] = []

    def find_item(self, item_id: int) -> Optional[MenuItem]:
        return next((item for item in self.items if item.id == item_id), None)

    def _require(self, item_id: int) -> MenuItem:
        item = self.find_item(item_id)
        if item is None:
            raise MenuItemNotFoundError(item_id)
        return item

    def _validate_draft(self, draft: MenuItemDraft) -> None:
        if not (draft.name or "").strip():
            raise ValidationError("Please fill in all required fields", field="name")
        if draft.price is None:
            raise ValidationError("Please fill in all required fields", field="price")
        if draft.category_id is None:
            raise ValidationError("Please fill in all required fields", field="category_id")
        if self._categories.categories and not self._categories.find_category(draft.category_id):
            raise ValidationError(
                f"Unknown category: {draft.category_id}", field="category_id"
            )

    async def load_items(self) -> OperationResult:
        try:
            records = await self._record_store.list(
                Collection.MENU_ITEM, sort=[SortSpec("name")]
            )
            self.items = [MenuItem.from_record(record) for record in records]
            self._logger.info("🍽️ MENU ITEMS LOADED: %d", len(self.items))
            return OperationResult.ok(self.items)
        except (BackOfficeError, ValueError, TypeError) as e:
            return self._fail("load menu items", e)

    async def create_item(self, draft: MenuItemDraft) -> OperationResult:
        try:
            self._validate_draft(draft)
            now = self._clock()
            item = MenuItem(
                id=None,
                name=draft.name.strip(),
                price=draft.price,
                category_id=draft.category_id,
                description=(draft.description or "").strip(),
                is_available=draft.is_available,
                image_url=draft.image_url or "",
                created_at=now,
                updated_at=now,
            )
            record = await self._record_store.create(Collection.MENU_ITEM, item.to_record())
            created = MenuItem.from_record(record)
            self.items.append(created)

            self._logger.info("✅ MENU ITEM CREATED: %s (%s)", created.name, created.id)
            await self._sync_counts([created.category_id])
            return self._succeed("Menu item added successfully!", created)

        except (BackOfficeError, ValueError, TypeError) as e:
            return self._fail("create menu item", e)

    async def update_item(self, item_id: int, draft: MenuItemDraft) -> OperationResult:
        """Overwrite an item; a new category_id moves it between categories"""
        try:
            current = self._require(item_id)
            self._validate_draft(draft)
            updated = MenuItem(
                id=item_id,
                name=draft.name.strip(),
                price=draft.price,
                category_id=draft.category_id,
                description=(draft.description or "").strip(),
                is_available=draft.is_available,
                image_url=draft.image_url or "",
                created_at=current.created_at,
                updated_at=self._clock(),
            )
            fields = updated.to_record()
            fields.pop("created_at", None)
            try:
                await self._record_store.update(Collection.MENU_ITEM, item_id, fields)
            except NotFoundError as e:
                raise MenuItemNotFoundError(item_id) from e

            self.items = [updated if item.id == item_id else item for item in self.items]
            if current.category_id != updated.category_id:
                self._logger.info(
                    "🔀 MENU ITEM MOVED: %s category %s → %s",
                    item_id,
                    current.category_id,
                    updated.category_id,
                )
                await self._sync_counts([current.category_id, updated.category_id])
            return self._succeed("Menu item updated successfully!", updated)

        except (BackOfficeError, ValueError, TypeError) as e:
            return self._fail("update menu item", e)

    async def delete_item(
        self, item_id: int, confirmation_service: Optional[ConfirmationService] = None
    ) -> OperationResult:
        try:
            item = self._require(item_id)
        except BackOfficeError as e:
            return self._fail("delete menu item", e)

        if not self._confirm("Are you sure you want to delete this menu item?", confirmation_service):
            return self._cancelled("Delete menu item")

        try:
            try:
                await self._record_store.delete(Collection.MENU_ITEM, item_id)
            except NotFoundError as e:
                raise MenuItemNotFoundError(item_id) from e

            self.items = [i for i in self.items if i.id != item_id]
            self._logger.info("🗑️ MENU ITEM DELETED: %s", item_id)
            await self._sync_counts([item.category_id])
            return self._succeed("Menu item deleted successfully!", item_id)

        except BackOfficeError as e:
            return self._fail("delete menu item", e)

    async def toggle_availability(self, item_id: int) -> OperationResult:
        try:
            item = self._require(item_id)
            is_available = not item.is_available
            now = self._clock()
            try:
                await self._record_store.update(
                    Collection.MENU_ITEM,
                    item_id,
                    {"is_available": is_available, "updated_at": format_datetime(now)},
                )
            except NotFoundError as e:
                raise MenuItemNotFoundError(item_id) from e

            item.is_available = is_available
            item.updated_at = now
            state = "activated" if is_available else "deactivated"
            return self._succeed(f"Item {state} successfully!", item)

        except BackOfficeError as e:
            return self._fail("toggle availability", e)

    async def bulk_update_availability(
        self, item_ids: Sequence[int], is_available: bool
    ) -> OperationResult:
        """All-or-nothing from the operator's view; local state moves only on full success"""
        try:
            items = [self._require(item_id) for item_id in item_ids]
        except BackOfficeError as e:
            return self._fail("bulk update availability", e)

        now = self._clock()
        results = await asyncio.gather(
            *(
                self._record_store.update(
                    Collection.MENU_ITEM,
                    item.id,
                    {"is_available": is_available, "updated_at": format_datetime(now)},
                )
                for item in items
            ),
            return_exceptions=True,
        )

        failures = [result for result in results if isinstance(result, BaseException)]
        if failures:
            return self._fail(
                "bulk update availability",
                PersistenceError(
                    f"{len(failures)} of {len(items)} availability updates failed: {failures[0]}",
                    operation="bulk_update_availability",
                ),
            )

        for item in items:
            item.is_available = is_available
            item.updated_at = now
        state = "activated" if is_available else "deactivated"
        return self._succeed(f"{len(items)} items {state} successfully!", items)

    def filtered_items(self, category_id: Optional[int] = None, search: str = "") -> List[MenuItem]:
        return filter_menu_items(self.items, category_id, search)

    def metrics(self) -> MenuMetrics:
        return menu_metrics(self._categories.categories, self.items)

    async def _sync_counts(self, category_ids: Sequence[int]) -> None:
        """Best-effort count write-back after an item change"""
        try:
            await self._categories.sync_item_counts(item_counts(self.items), category_ids)
        except BackOfficeError as e:
            self._logger.warning("⚠️ ITEM COUNT SYNC FAILED: %s", e)

    async def reconcile_item_counts(self) -> OperationResult:
        """Rewrite every category's count from the current item list"""
        try:
            changed = await self._categories.sync_item_counts(item_counts(self.items))
            return OperationResult.ok(changed)
        except BackOfficeError as e:
            return self._fail("reconcile item counts", e)
