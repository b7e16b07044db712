"""
Category Management Use Case

Category CRUD plus the optimistic drag-to-reorder protocol: the new order is
applied locally first, every category is persisted concurrently, and any
failure restores the list as it was before the gesture.
"""

import asyncio
import copy
from collections import Counter
from typing import List, Optional, Sequence, TypeVar

from src.application.dtos.operation_result import OperationResult
from src.application.interfaces.notifications import (
    ConfirmationService,
    NotificationService,
)
from src.application.use_cases.operator_use_case import Clock, OperatorUseCase
from src.domain.entities.menu_entity import Category
from src.domain.entities.record_fields import utc_now
from src.domain.repositories.record_store import Collection, RecordStore, SortSpec
from src.infrastructure.utilities.exceptions import (
    BackOfficeError,
    CategoryNotEmptyError,
    CategoryNotFoundError,
    NotFoundError,
    PersistenceError,
    ValidationError,
)

T = TypeVar("T")


def array_move(items: Sequence[T], old_index: int, new_index: int) -> List[T]:
    """Move one element to a new index, shifting the rest"""
    moved = list(items)
    moved.insert(new_index, moved.pop(old_index))
    return moved


class CategoryManagementUseCase(OperatorUseCase):
    """Use case for menu categories"""

    def __init__(
        self,
        record_store: RecordStore,
        notification_service: NotificationService,
        confirmation_service: Optional[ConfirmationService] = None,
        clock: Clock = utc_now,
    ):
        super().__init__(notification_service, confirmation_service, clock)
        self._record_store = record_store
        self.categories: List[Category] = []

    def find_category(self, category_id: int) -> Optional[Category]:
        return next((c for c in self.categories if c.id == category_id), None)

    def _require(self, category_id: int) -> Category:
        category = self.find_category(category_id)
        if category is None:
            raise CategoryNotFoundError(category_id)
        return category

    async def load_categories(self) -> OperationResult:
        try:
            records = await self._record_store.list(
                Collection.CATEGORY, sort=[SortSpec("display_order")]
            )
            self.categories = [Category.from_record(record) for record in records]
            self._logger.info("📂 CATEGORIES LOADED: %d", len(self.categories))
            return OperationResult.ok(self.categories)
        except (BackOfficeError, ValueError, TypeError) as e:
            return self._fail("load categories", e)

    async def create_category(self, name: str) -> OperationResult:
        try:
            if not (name or "").strip():
                raise ValidationError("Category name is required", field="name")

            category = Category(
                id=None, name=name.strip(), display_order=len(self.categories) + 1
            )
            record = await self._record_store.create(Collection.CATEGORY, category.to_record())
            created = Category.from_record(record)
            self.categories.append(created)

            self._logger.info("✅ CATEGORY CREATED: %s (%s)", created.name, created.id)
            return self._succeed("Category added successfully!", created)

        except (BackOfficeError, ValueError, TypeError) as e:
            return self._fail("create category", e)

    async def rename_category(self, category_id: int, name: str) -> OperationResult:
        try:
            if not (name or "").strip():
                raise ValidationError("Category name is required", field="name")
            category = self._require(category_id)

            try:
                await self._record_store.update(
                    Collection.CATEGORY, category_id, {"name": name.strip()}
                )
            except NotFoundError as e:
                raise CategoryNotFoundError(category_id) from e

            category.name = name.strip()
            return self._succeed("Category updated successfully!", category)

        except (BackOfficeError, ValueError, TypeError) as e:
            return self._fail("rename category", e)

    async def delete_category(
        self, category_id: int, confirmation_service: Optional[ConfirmationService] = None
    ) -> OperationResult:
        """Delete an empty category; categories with items are refused up front.

        The stored item_count can lag behind a failed count sync, so menu items
        still pointing at the category also block the delete.
        """
        try:
            category = self._require(category_id)
            if category.has_items() or await self._record_store.list(
                Collection.MENU_ITEM, filters={"category_id": category_id}
            ):
                raise CategoryNotEmptyError(category_id)
        except BackOfficeError as e:
            return self._fail("delete category", e)

        if not self._confirm(
            f"Are you sure you want to delete the category '{category.name}'?",
            confirmation_service,
        ):
            return self._cancelled("Delete category")

        try:
            try:
                await self._record_store.delete(Collection.CATEGORY, category_id)
            except NotFoundError as e:
                raise CategoryNotFoundError(category_id) from e

            self.categories = [c for c in self.categories if c.id != category_id]
            self._logger.info("🗑️ CATEGORY DELETED: %s", category_id)
            return self._succeed("Category deleted successfully!", category_id)

        except BackOfficeError as e:
            return self._fail("delete category", e)

    # ------------------------------------------------------------------
    # Optimistic reorder
    # ------------------------------------------------------------------

    async def reorder_categories(self, old_index: int, new_index: int) -> OperationResult:
        try:
            size = len(self.categories)
            if not (0 <= old_index < size and 0 <= new_index < size):
                raise ValidationError(
                    f"Reorder indexes out of range: {old_index} → {new_index} of {size}"
                )
        except ValidationError as e:
            return self._fail("reorder categories", e)

        if old_index == new_index:
            return OperationResult.ok(self.categories)

        snapshot = copy.deepcopy(self.categories)
        reordered = array_move(self.categories, old_index, new_index)
        for position, category in enumerate(reordered):
            category.display_order = position + 1
        self.categories = reordered

        self._logger.info("↕️ CATEGORY REORDER: %d → %d", old_index, new_index)
        results = await asyncio.gather(
            *(
                self._record_store.update(
                    Collection.CATEGORY, category.id, {"display_order": category.display_order}
                )
                for category in reordered
            ),
            return_exceptions=True,
        )

        failures = [result for result in results if isinstance(result, BaseException)]
        if failures:
            self.categories = snapshot
            self._logger.warning(
                "↩️ CATEGORY REORDER ROLLED BACK: %d of %d updates failed",
                len(failures),
                len(results),
            )
            return self._fail(
                "reorder categories",
                PersistenceError(
                    f"Failed to persist category order: {failures[0]}",
                    operation="reorder_categories",
                    user_message="Failed to reorder categories",
                ),
            )

        return self._succeed("Categories reordered successfully!", self.categories)

    async def handle_drag_end(self, active_id: int, over_id: Optional[int]) -> Optional[OperationResult]:
        """Drop of a category row onto another row's position"""
        if over_id is None or active_id == over_id:
            return None

        ids = [category.id for category in self.categories]
        if active_id not in ids or over_id not in ids:
            return None

        return await self.reorder_categories(ids.index(active_id), ids.index(over_id))

    # ------------------------------------------------------------------
    # Item counts
    # ------------------------------------------------------------------

    async def sync_item_counts(
        self, counts: Counter, category_ids: Optional[Sequence[int]] = None
    ) -> List[Category]:
        """Persist recomputed item counts, one call per changed category.

        Errors propagate to the caller; counts already written stay written.
        """
        targets = (
            [self.find_category(cid) for cid in category_ids]
            if category_ids is not None
            else list(self.categories)
        )

        changed = []
        for category in targets:
            if category is None or category.item_count == counts.get(category.id, 0):
                continue
            new_count = counts.get(category.id, 0)
            await self._record_store.update(
                Collection.CATEGORY, category.id, {"item_count": new_count}
            )
            category.item_count = new_count
            changed.append(category)

        if changed:
            self._logger.info(
                "🔢 ITEM COUNTS SYNCED: %s",
                ", ".join(f"{c.name}={c.item_count}" for c in changed),
            )
        return changed
