"""
Domain value objects package

Contains immutable value objects that represent concepts in the business domain.
"""

from .elapsed_time import ElapsedTime
from .floor_position import FloorPosition
from .money import Money
from .order_number import OrderNumber

__all__ = [
    "ElapsedTime",
    "FloorPosition",
    "Money",
    "OrderNumber",
]
