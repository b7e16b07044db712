"""
Domain Layer Tests - Value Objects and Entities
"""

from datetime import timedelta
from decimal import Decimal

import pytest

from conftest import FIXED_NOW
from src.domain.entities.menu_entity import Category, MenuItem
from src.domain.entities.order_entity import Order, OrderItem, OrderStatus
from src.domain.entities.table_entity import Table, TableStatus
from src.domain.value_objects.elapsed_time import ElapsedTime
from src.domain.value_objects.floor_position import FloorPosition
from src.domain.value_objects.money import Money
from src.domain.value_objects.order_number import ORDER_NUMBER_PATTERN, OrderNumber


def make_menu_item(item_id=7, name="Tiramisu", price="12.50"):
    return MenuItem(id=item_id, name=name, price=Decimal(price), category_id=3)


def make_order(**overrides):
    fields = {
        "id": 1,
        "order_number": "ORD-123456",
        "customer_name": "Ana",
        "table_number": "Table 5",
        "created_at": FIXED_NOW,
        "updated_at": FIXED_NOW,
    }
    fields.update(overrides)
    return Order(**fields)


class TestValueObjects:
    """Test domain value objects validation and behavior"""

    def test_money_rounds_and_adds(self):
        total = Money("12.50") + Money("0.255")
        assert total.amount == Decimal("12.76")
        assert total.format_display() == "12.76 USD"

    def test_money_rejects_negative(self):
        with pytest.raises(ValueError):
            Money("-1")

    def test_order_number_from_timestamp_uses_last_six_millis(self):
        moment = FIXED_NOW.replace(microsecond=123000)
        number = OrderNumber.from_timestamp(moment)
        millis = str(int(moment.timestamp() * 1000))
        assert number.value == f"ORD-{millis[-6:]}"
        assert ORDER_NUMBER_PATTERN.match(number.value)

    def test_order_number_invalid(self):
        for value in ["", "ORD-12", "XYZ-123456", "ORD-1234567"]:
            with pytest.raises(ValueError):
                OrderNumber(value)

    def test_elapsed_time_between(self):
        elapsed = ElapsedTime.between(FIXED_NOW, FIXED_NOW + timedelta(minutes=3, seconds=7))
        assert (elapsed.minutes, elapsed.seconds) == (3, 7)
        assert str(elapsed) == "3:07"

    def test_elapsed_time_clamps_future_origin(self):
        elapsed = ElapsedTime.between(FIXED_NOW + timedelta(seconds=30), FIXED_NOW)
        assert elapsed.total_seconds == 0

    def test_floor_position_moved_by_clamps_at_zero(self):
        assert FloorPosition(100, 100).moved_by(50, -20) == FloorPosition(150, 80)
        assert FloorPosition(100, 100).moved_by(-200, 0) == FloorPosition(0, 100)

    def test_floor_position_negative_rejected(self):
        with pytest.raises(ValueError):
            FloorPosition(-1, 0)


class TestOrderEntity:
    """Test order totals, line items and elapsed time"""

    def test_add_item_twice_yields_single_line(self):
        order = make_order()
        tiramisu = make_menu_item()

        order.add_item(tiramisu)
        order.add_item(tiramisu)

        assert len(order.items) == 1
        assert order.items[0].quantity == 2
        assert order.total_amount == Decimal("25.00")

    def test_add_item_new_line_gets_next_id(self):
        order = make_order()
        order.add_item(make_menu_item(7))
        order.add_item(make_menu_item(8, "Cheesecake", "9.00"))
        assert [item.id for item in order.items] == [1, 2]
        assert order.total_amount == Decimal("21.50")

    @pytest.mark.parametrize("quantity", [0, -1])
    def test_non_positive_quantity_removes_line(self, quantity):
        order = make_order()
        line = order.add_item(make_menu_item())

        order.update_item_quantity(line.id, quantity)

        assert order.items == []
        assert order.total_amount == Decimal("0")

    def test_update_item_quantity_sets_quantity(self):
        order = make_order()
        line = order.add_item(make_menu_item())
        order.update_item_quantity(line.id, 4)
        assert order.items[0].quantity == 4
        assert order.total_amount == Decimal("50.00")

    @pytest.mark.parametrize("quantity", [0, 1])
    def test_unchanged_quantity_keeps_timestamp(self, quantity):
        order = make_order()
        line = order.add_item(make_menu_item(), at=FIXED_NOW)
        later = FIXED_NOW + timedelta(minutes=2)

        assert order.update_item_quantity(999, quantity, at=later) is False
        assert order.update_item_quantity(line.id, 1, at=later) is False

        assert order.updated_at == FIXED_NOW
        assert len(order.items) == 1

    def test_total_tracks_every_mutation(self):
        order = make_order()
        a = order.add_item(make_menu_item(1, "Soup", "6.75"))
        order.add_item(make_menu_item(2, "Steak", "32.00"))
        order.update_item_quantity(a.id, 3)

        expected = sum(item.price * item.quantity for item in order.items)
        assert order.total_amount == expected == Decimal("52.25")

    def test_elapsed_counts_from_latest_timestamp(self):
        order = make_order(updated_at=FIXED_NOW + timedelta(minutes=5))
        now = FIXED_NOW + timedelta(minutes=6, seconds=10)
        assert order.elapsed(now) == ElapsedTime(1, 10)

    def test_mutation_resets_elapsed(self):
        order = make_order()
        later = FIXED_NOW + timedelta(minutes=10)
        assert order.elapsed(later).minutes == 10

        order.add_item(make_menu_item(), at=later)
        assert order.elapsed(later) == ElapsedTime(0, 0)

    def test_unknown_status_rejected(self):
        with pytest.raises(ValueError):
            OrderStatus.parse("cooking")

    def test_record_round_trip_keeps_items_and_total(self):
        order = make_order()
        order.add_item(make_menu_item())
        record = {"id": order.id, **order.to_record()}

        restored = Order.from_record(record)

        assert restored.items == order.items
        assert record["total_amount"] == 12.5
        assert restored.created_at == FIXED_NOW

    def test_order_item_rejects_zero_quantity(self):
        with pytest.raises(ValueError):
            OrderItem(id=1, menu_item_id=1, menu_item_name="x", quantity=0)


class TestCatalogEntities:
    """Test menu and table entities"""

    def test_menu_item_validation(self):
        with pytest.raises(ValueError):
            MenuItem(id=None, name=" ", price=Decimal("1"), category_id=1)
        with pytest.raises(ValueError):
            MenuItem(id=None, name="Soup", price=Decimal("-1"), category_id=1)
        with pytest.raises(ValueError):
            MenuItem(id=None, name="Soup", price=Decimal("1"), category_id=None)

    def test_category_has_items(self):
        assert Category(id=1, name="Mains", item_count=2).has_items()
        assert not Category(id=1, name="Mains").has_items()

    def test_menu_item_from_record_defaults(self):
        item = MenuItem.from_record({"id": "4", "name": "Salmon", "price": 24, "category_id": "2"})
        assert item.id == 4
        assert item.category_id == 2
        assert item.is_available is True

    def test_table_from_record(self):
        table = Table.from_record(
            {"id": 2, "number": 2, "seats": 4, "status": "occupied", "server": "Alice",
             "x": 250, "y": 100, "shape": "square"}
        )
        assert table.status is TableStatus.OCCUPIED
        assert table.position == FloorPosition(250, 100)

    def test_table_requires_seat(self):
        with pytest.raises(ValueError):
            Table(id=None, number=1, seats=0)
