"""
Category and menu item use case tests
"""

from decimal import Decimal

import pytest
import pytest_asyncio

from conftest import seed_categories
from src.application.dtos.catalog_dtos import MenuItemDraft
from src.application.use_cases.category_management_use_case import array_move
from src.domain.repositories.record_store import Collection


def snapshot(categories):
    return [(c.id, c.name, c.display_order) for c in categories.categories]


class TestArrayMove:
    def test_move_last_to_front(self):
        assert array_move(["A", "B", "C"], 2, 0) == ["C", "A", "B"]

    def test_move_first_to_back(self):
        assert array_move(["A", "B", "C"], 0, 2) == ["B", "C", "A"]

    def test_original_untouched(self):
        items = ["A", "B", "C"]
        array_move(items, 0, 1)
        assert items == ["A", "B", "C"]


class TestCategoryReorder:
    """Optimistic reorder with snapshot rollback"""

    @pytest.mark.asyncio
    async def test_move_c_to_front(self, categories, store, notifier):
        await seed_categories(store, "A", "B", "C")
        await categories.load_categories()

        result = await categories.reorder_categories(2, 0)

        assert result.success is True
        assert [(name, order) for _, name, order in snapshot(categories)] == [
            ("C", 1), ("A", 2), ("B", 3)
        ]
        stored = await store.list(Collection.CATEGORY)
        assert {r["name"]: r["display_order"] for r in stored} == {"C": 1, "A": 2, "B": 3}
        assert notifier.successes == ["Categories reordered successfully!"]

    @pytest.mark.asyncio
    async def test_display_order_contiguous(self, categories, store):
        await seed_categories(store, "A", "B", "C", "D", "E")
        await categories.load_categories()

        await categories.reorder_categories(1, 3)

        assert [c.display_order for c in categories.categories] == [1, 2, 3, 4, 5]
        assert [c.name for c in categories.categories] == ["A", "C", "D", "B", "E"]

    @pytest.mark.asyncio
    async def test_failure_restores_snapshot(self, categories, store, notifier):
        await seed_categories(store, "A", "B", "C")
        await categories.load_categories()
        before = snapshot(categories)
        store.fail_operations.add("update")
        store.fail_ids = {2}

        result = await categories.reorder_categories(2, 0)

        assert result.success is False
        assert result.error_code == "PERSISTENCE_ERROR"
        assert snapshot(categories) == before
        assert [(name, order) for _, name, order in before] == [("A", 1), ("B", 2), ("C", 3)]
        assert notifier.errors == ["Failed to reorder categories"]
        assert notifier.successes == []
        # Every call was still issued
        assert len(store.calls_for("update")) == 3

    @pytest.mark.asyncio
    async def test_same_index_is_noop(self, categories, store):
        await seed_categories(store, "A", "B")
        await categories.load_categories()

        result = await categories.reorder_categories(1, 1)

        assert result.success is True
        assert store.calls_for("update") == []

    @pytest.mark.asyncio
    async def test_out_of_range_index(self, categories, store):
        await seed_categories(store, "A", "B")
        await categories.load_categories()

        result = await categories.reorder_categories(0, 5)

        assert result.error_code == "VALIDATION_ERROR"
        assert store.calls_for("update") == []

    @pytest.mark.asyncio
    async def test_drag_end_maps_ids_to_indexes(self, categories, store):
        await seed_categories(store, "A", "B", "C")
        await categories.load_categories()
        a_id = categories.categories[0].id
        c_id = categories.categories[2].id

        await categories.handle_drag_end(c_id, a_id)

        assert [c.name for c in categories.categories] == ["C", "A", "B"]
        assert await categories.handle_drag_end(c_id, None) is None


class TestCategoryCrud:
    """Category create, rename and delete"""

    @pytest.mark.asyncio
    async def test_create_appends_with_next_display_order(self, categories, store, notifier):
        await seed_categories(store, "A")
        await categories.load_categories()

        result = await categories.create_category("Desserts")

        assert result.data.display_order == 2
        assert result.data.item_count == 0
        assert notifier.successes == ["Category added successfully!"]

    @pytest.mark.asyncio
    async def test_blank_name_rejected(self, categories, store):
        result = await categories.create_category("   ")
        assert result.error_code == "VALIDATION_ERROR"
        assert store.calls_for("create") == []

    @pytest.mark.asyncio
    async def test_rename(self, categories, store):
        await seed_categories(store, "Starters")
        await categories.load_categories()
        category_id = categories.categories[0].id

        result = await categories.rename_category(category_id, "Appetizers")

        assert result.success is True
        assert (await store.get_by_id(Collection.CATEGORY, category_id))["name"] == "Appetizers"

    @pytest.mark.asyncio
    async def test_delete_non_empty_rejected_without_persistence(
        self, categories, store, notifier, confirm_yes
    ):
        await store.create(
            Collection.CATEGORY,
            {"name": "Mains", "display_order": 1, "item_count": 2, "is_active": True},
        )
        await categories.load_categories()
        store.calls.clear()

        result = await categories.delete_category(categories.categories[0].id)

        assert result.error_code == "BUSINESS_ERROR"
        assert store.calls_for("delete") == []
        assert confirm_yes.prompts == []
        assert notifier.errors == [
            "Cannot delete category with items. Please move or delete items first."
        ]

    @pytest.mark.asyncio
    async def test_delete_empty_category(self, categories, store):
        await seed_categories(store, "A", "B")
        await categories.load_categories()
        first_id = categories.categories[0].id

        result = await categories.delete_category(first_id)

        assert result.success is True
        assert [c.name for c in categories.categories] == ["B"]


class TestMenuItems:
    """Menu item CRUD and item-count sync"""

    @pytest_asyncio.fixture
    async def loaded(self, store, categories, menu_items):
        await seed_categories(store, "Mains", "Desserts")
        await categories.load_categories()
        await menu_items.load_items()
        return categories.categories

    @pytest.mark.asyncio
    async def test_create_item_syncs_count(self, loaded, menu_items, categories, store, notifier):
        mains = loaded[0]

        result = await menu_items.create_item(
            MenuItemDraft(name="Salmon", price=Decimal("24.00"), category_id=mains.id)
        )

        assert result.success is True
        assert categories.find_category(mains.id).item_count == 1
        stored = await store.get_by_id(Collection.CATEGORY, mains.id)
        assert stored["item_count"] == 1
        assert notifier.successes == ["Menu item added successfully!"]

    @pytest.mark.asyncio
    async def test_create_item_requires_fields(self, loaded, menu_items, store):
        result = await menu_items.create_item(
            MenuItemDraft(name="", price=Decimal("1"), category_id=loaded[0].id)
        )
        assert result.error_code == "VALIDATION_ERROR"

        result = await menu_items.create_item(
            MenuItemDraft(name="Soup", price=Decimal("-1"), category_id=loaded[0].id)
        )
        assert result.error_code == "VALIDATION_ERROR"

        result = await menu_items.create_item(
            MenuItemDraft(name="Soup", price=Decimal("1"), category_id=None)
        )
        assert result.error_code == "VALIDATION_ERROR"
        assert store.calls_for("create") == []

    @pytest.mark.asyncio
    async def test_move_item_between_categories(self, loaded, menu_items, categories):
        mains, desserts = loaded
        item = (
            await menu_items.create_item(
                MenuItemDraft(name="Cake", price=Decimal("9"), category_id=mains.id)
            )
        ).data

        await menu_items.update_item(
            item.id, MenuItemDraft(name="Cake", price=Decimal("9"), category_id=desserts.id)
        )

        assert categories.find_category(mains.id).item_count == 0
        assert categories.find_category(desserts.id).item_count == 1

    @pytest.mark.asyncio
    async def test_count_sync_failure_keeps_item(self, loaded, menu_items, categories, store):
        mains = loaded[0]
        store.fail_operations.add("update")

        result = await menu_items.create_item(
            MenuItemDraft(name="Salmon", price=Decimal("24"), category_id=mains.id)
        )

        assert result.success is True
        assert len(menu_items.items) == 1
        # Stale until the next successful sync
        assert categories.find_category(mains.id).item_count == 0

        store.fail_operations.clear()
        reconciled = await menu_items.reconcile_item_counts()
        assert [c.id for c in reconciled.data] == [mains.id]
        assert categories.find_category(mains.id).item_count == 1

    @pytest.mark.asyncio
    async def test_delete_item_and_category_guard(self, loaded, menu_items, categories):
        mains = loaded[0]
        item = (
            await menu_items.create_item(
                MenuItemDraft(name="Salmon", price=Decimal("24"), category_id=mains.id)
            )
        ).data

        blocked = await categories.delete_category(mains.id)
        assert blocked.error_code == "BUSINESS_ERROR"

        await menu_items.delete_item(item.id)
        assert categories.find_category(mains.id).item_count == 0
        assert (await categories.delete_category(mains.id)).success is True

    @pytest.mark.asyncio
    async def test_stale_count_still_blocks_category_delete(
        self, loaded, menu_items, categories, store, notifier
    ):
        mains = loaded[0]
        store.fail_operations.add("update")
        await menu_items.create_item(
            MenuItemDraft(name="Salmon", price=Decimal("24"), category_id=mains.id)
        )
        store.fail_operations.clear()
        assert categories.find_category(mains.id).item_count == 0

        result = await categories.delete_category(mains.id)

        assert result.error_code == "BUSINESS_ERROR"
        assert store.calls_for("delete") == []
        assert categories.find_category(mains.id) is not None
        assert await store.get_by_id(Collection.CATEGORY, mains.id) is not None
        assert notifier.errors[-1] == (
            "Cannot delete category with items. Please move or delete items first."
        )

    @pytest.mark.asyncio
    async def test_toggle_availability(self, loaded, menu_items, notifier):
        item = (
            await menu_items.create_item(
                MenuItemDraft(name="Salmon", price=Decimal("24"), category_id=loaded[0].id)
            )
        ).data

        await menu_items.toggle_availability(item.id)
        assert menu_items.find_item(item.id).is_available is False
        await menu_items.toggle_availability(item.id)

        assert notifier.successes[-2:] == [
            "Item deactivated successfully!",
            "Item activated successfully!",
        ]

    @pytest.mark.asyncio
    async def test_bulk_availability_all_or_nothing(self, loaded, menu_items, store):
        ids = []
        for name in ("Soup", "Salad", "Bread"):
            result = await menu_items.create_item(
                MenuItemDraft(name=name, price=Decimal("5"), category_id=loaded[0].id)
            )
            ids.append(result.data.id)

        store.fail_operations.add("update")
        store.fail_ids = {ids[1]}
        failed = await menu_items.bulk_update_availability(ids, False)

        assert failed.error_code == "PERSISTENCE_ERROR"
        assert all(menu_items.find_item(i).is_available for i in ids)

        store.fail_operations.clear()
        done = await menu_items.bulk_update_availability(ids, False)
        assert done.success is True
        assert not any(menu_items.find_item(i).is_available for i in ids)

    @pytest.mark.asyncio
    async def test_filters_and_metrics(self, loaded, menu_items):
        mains, desserts = loaded
        for name, category, available in (
            ("Grilled Salmon", mains, True),
            ("Ribeye", mains, False),
            ("Tiramisu", desserts, True),
        ):
            await menu_items.create_item(
                MenuItemDraft(
                    name=name,
                    price=Decimal("10"),
                    category_id=category.id,
                    description="house special" if name == "Ribeye" else "",
                    is_available=available,
                )
            )

        assert [i.name for i in menu_items.filtered_items(mains.id)] == ["Grilled Salmon", "Ribeye"]
        assert [i.name for i in menu_items.filtered_items(search="SPECIAL")] == ["Ribeye"]
        assert [i.name for i in menu_items.filtered_items(desserts.id, "salmon")] == []

        metrics = menu_items.metrics()
        assert (metrics.total_items, metrics.active_items, metrics.categories) == (3, 2, 2)
