"""
Domain entities package

Contains the core business entities of the back office.
"""

from .customer_entity import Customer
from .menu_entity import Category, MenuItem
from .order_entity import Order, OrderItem, OrderStatus, OrderType
from .table_entity import Table, TableShape, TableStatus

__all__ = [
    "Category",
    "Customer",
    "MenuItem",
    "Order",
    "OrderItem",
    "OrderStatus",
    "OrderType",
    "Table",
    "TableShape",
    "TableStatus",
]
