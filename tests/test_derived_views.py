"""
Derived view tests - filters and aggregates
"""

from datetime import timedelta
from decimal import Decimal

import pytest

from conftest import FIXED_NOW
from src.application.derived_views import (
    filter_menu_items,
    filter_orders,
    item_counts,
    menu_metrics,
    order_stats,
    table_stats,
)
from src.domain.entities.menu_entity import Category, MenuItem
from src.domain.entities.order_entity import Order, OrderItem, OrderStatus
from src.domain.entities.table_entity import Table, TableStatus


def order(order_id, number, customer, table, status=OrderStatus.RECEIVED, total="10", days_ago=0):
    created = FIXED_NOW - timedelta(days=days_ago)
    return Order(
        id=order_id,
        order_number=number,
        customer_name=customer,
        table_number=table,
        status=status,
        items=[
            OrderItem(id=1, menu_item_id=1, menu_item_name="Dish", quantity=1, price=Decimal(total))
        ],
        created_at=created,
        updated_at=created,
    )


@pytest.fixture
def orders():
    return [
        order(1, "ORD-100001", "Ana Lima", "Table 5", total="12.50"),
        order(2, "ORD-100002", "Ben Ode", "Bar Seat 1", OrderStatus.PREPARING, "30"),
        order(3, "ORD-200003", "Cy Tan", "Patio Table 2", OrderStatus.SERVED, "7.50", days_ago=1),
    ]


class TestFilterOrders:
    def test_search_matches_any_text_field(self, orders):
        assert [o.id for o in filter_orders(orders, "ord-2")] == [3]
        assert [o.id for o in filter_orders(orders, "BEN")] == [2]
        assert [o.id for o in filter_orders(orders, "patio")] == [3]

    def test_search_and_status_combine(self, orders):
        assert [o.id for o in filter_orders(orders, "ORD-1", "preparing")] == [2]
        assert filter_orders(orders, "Ana", "served") == []

    def test_all_matches_everything(self, orders):
        assert len(filter_orders(orders, "", "all")) == 3

    def test_unknown_status_raises(self, orders):
        with pytest.raises(ValueError):
            filter_orders(orders, "", "cooking")


class TestAggregates:
    def test_order_stats(self, orders):
        stats = order_stats(orders, FIXED_NOW.date())

        assert (stats.total, stats.today) == (3, 2)
        assert (stats.pending, stats.preparing, stats.ready, stats.completed) == (1, 1, 0, 1)
        assert stats.total_revenue == Decimal("50.00")
        assert stats.today_revenue == Decimal("42.50")
        assert stats.to_dict()["today_revenue"] == 42.5

    def test_table_stats(self):
        tables = [
            Table(id=1, number=1, seats=2, status=TableStatus.OCCUPIED),
            Table(id=2, number=2, seats=4, status=TableStatus.OCCUPIED),
            Table(id=3, number=3, seats=4, status=TableStatus.CLEANING),
        ]
        stats = table_stats(tables)
        assert stats.to_dict() == {
            "total": 3, "available": 0, "occupied": 2, "reserved": 0, "cleaning": 1
        }

    def test_menu_filters_and_counts(self):
        items = [
            MenuItem(id=1, name="Caesar Salad", price=Decimal("9"), category_id=1),
            MenuItem(id=2, name="Ribeye", price=Decimal("32"), category_id=2,
                     description="with salad", is_available=False),
            MenuItem(id=3, name="Tiramisu", price=Decimal("12.5"), category_id=3),
        ]
        categories = [Category(id=i, name=str(i)) for i in (1, 2, 3)]

        assert [i.id for i in filter_menu_items(items, search="salad")] == [1, 2]
        assert [i.id for i in filter_menu_items(items, 2, "salad")] == [2]
        assert [i.id for i in filter_menu_items(items)] == [1, 2, 3]
        assert item_counts(items) == {1: 1, 2: 1, 3: 1}
        assert menu_metrics(categories, items).to_dict() == {
            "total_items": 3, "active_items": 2, "categories": 3
        }
