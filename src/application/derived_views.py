"""
Derived views over the in-process collections

Pure functions, recomputed from the full collection on every call.
"""

from collections import Counter
from datetime import date
from decimal import Decimal
from typing import Iterable, List, Optional

from src.application.dtos.stats_dtos import MenuMetrics, OrderStats, TableStats
from src.domain.entities.menu_entity import Category, MenuItem
from src.domain.entities.order_entity import Order, OrderStatus
from src.domain.entities.table_entity import Table, TableStatus
from src.infrastructure.utilities.constants import BoardSettings


def _contains(haystack: Optional[str], needle: str) -> bool:
    return needle in (haystack or "").lower()


def filter_orders(
    orders: Iterable[Order], search: str = "", status: str = BoardSettings.STATUS_FILTER_ALL
) -> List[Order]:
    """Substring search over number/customer/table AND status equality"""
    needle = (search or "").strip().lower()
    wanted = None
    if status and status != BoardSettings.STATUS_FILTER_ALL:
        wanted = OrderStatus.parse(status)

    return [
        order
        for order in orders
        if (
            not needle
            or _contains(order.order_number, needle)
            or _contains(order.customer_name, needle)
            or _contains(order.table_number, needle)
        )
        and (wanted is None or order.status == wanted)
    ]


def filter_menu_items(
    items: Iterable[MenuItem], category_id: Optional[int] = None, search: str = ""
) -> List[MenuItem]:
    """Category equality (None matches all) AND substring over name/description"""
    needle = (search or "").strip().lower()
    return [
        item
        for item in items
        if (category_id is None or item.category_id == category_id)
        and (not needle or _contains(item.name, needle) or _contains(item.description, needle))
    ]


def order_stats(orders: Iterable[Order], today: date) -> OrderStats:
    orders = list(orders)
    todays = [
        order for order in orders if order.created_at and order.created_at.date() == today
    ]
    counts = Counter(order.status for order in orders)

    return OrderStats(
        total=len(orders),
        today=len(todays),
        pending=counts[OrderStatus.RECEIVED],
        preparing=counts[OrderStatus.PREPARING],
        ready=counts[OrderStatus.READY],
        completed=counts[OrderStatus.SERVED],
        total_revenue=sum((order.total_amount for order in orders), Decimal("0")),
        today_revenue=sum((order.total_amount for order in todays), Decimal("0")),
    )


def table_stats(tables: Iterable[Table]) -> TableStats:
    tables = list(tables)
    counts = Counter(table.status for table in tables)
    return TableStats(
        total=len(tables),
        available=counts[TableStatus.AVAILABLE],
        occupied=counts[TableStatus.OCCUPIED],
        reserved=counts[TableStatus.RESERVED],
        cleaning=counts[TableStatus.CLEANING],
    )


def menu_metrics(categories: Iterable[Category], items: Iterable[MenuItem]) -> MenuMetrics:
    items = list(items)
    return MenuMetrics(
        total_items=len(items),
        active_items=sum(1 for item in items if item.is_available),
        categories=len(list(categories)),
    )


def item_counts(items: Iterable[MenuItem]) -> Counter:
    """Number of menu items per category id"""
    return Counter(item.category_id for item in items)
