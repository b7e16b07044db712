"""
Order DTOs

Data Transfer Objects for order-related operations.
"""

from dataclasses import dataclass, field
from decimal import Decimal
from typing import List, Optional, Union

from src.domain.entities.order_entity import OrderType


@dataclass
class OrderItemDraft:
    """A line of a new order"""

    menu_item_id: int
    menu_item_name: str
    price: Decimal
    quantity: int = 1
    special_requests: str = ""


@dataclass
class OrderDraft:
    """Request to create an order"""

    customer_name: str
    table_number: str
    items: List[OrderItemDraft] = field(default_factory=list)
    order_type: OrderType = OrderType.DINE_IN
    special_requests: str = ""
    customer_id: Optional[int] = None


@dataclass(frozen=True)
class DragEndEvent:
    """End of a pointer drag on the order board.

    ``over_id`` is a column id (status value), the id of another order card,
    or None when the drag was cancelled or dropped outside every column.
    """

    active_id: int
    over_id: Optional[Union[str, int]] = None
