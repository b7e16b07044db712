# pylint: disable=too-many-instance-attributes
"""
Order Entity - lifecycle status, line items and the derived total
"""

from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal
from enum import Enum
from typing import Any, Dict, List, Optional

from src.domain.entities.menu_entity import MenuItem
from src.domain.entities.record_fields import (
    format_datetime,
    optional_int,
    parse_datetime,
    utc_now,
)
from src.domain.value_objects.elapsed_time import ElapsedTime
from src.domain.value_objects.money import Money, to_decimal


class OrderStatus(str, Enum):
    """Board columns, in lifecycle order"""

    RECEIVED = "received"
    PREPARING = "preparing"
    READY = "ready"
    SERVED = "served"

    @classmethod
    def parse(cls, value: "str | OrderStatus") -> "OrderStatus":
        try:
            return cls(value)
        except ValueError as e:
            allowed = ", ".join(status.value for status in cls)
            raise ValueError(f"Unknown order status '{value}'. Expected one of: {allowed}") from e

    @classmethod
    def ordered(cls) -> List["OrderStatus"]:
        return list(cls)


class OrderType(str, Enum):
    """How the order is fulfilled"""

    DINE_IN = "dine-in"
    TAKEOUT = "takeout"
    DELIVERY = "delivery"


@dataclass
class OrderItem:
    """A single order line"""

    id: int
    menu_item_id: int
    menu_item_name: str
    quantity: int = 1
    price: Decimal = Decimal("0")
    special_requests: str = ""

    def __post_init__(self):
        self.price = to_decimal(self.price)
        if self.quantity < 1:
            raise ValueError("Order item quantity must be at least 1")
        if self.price < 0:
            raise ValueError("Order item price cannot be negative")

    @property
    def line_total(self) -> Money:
        return Money(self.price) * self.quantity

    @classmethod
    def from_record(cls, record: Dict[str, Any]) -> "OrderItem":
        return cls(
            id=int(record["id"]),
            menu_item_id=int(record["menu_item_id"]),
            menu_item_name=record.get("menu_item_name") or "",
            quantity=int(record.get("quantity") or 1),
            price=record.get("price"),
            special_requests=record.get("special_requests") or "",
        )

    def to_record(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "menu_item_id": self.menu_item_id,
            "menu_item_name": self.menu_item_name,
            "quantity": self.quantity,
            "price": float(self.price),
            "special_requests": self.special_requests,
        }


@dataclass
class Order:
    """Order domain entity"""

    id: Optional[int]
    order_number: str
    customer_name: str
    table_number: str
    order_type: OrderType = OrderType.DINE_IN
    status: OrderStatus = OrderStatus.RECEIVED
    items: List[OrderItem] = field(default_factory=list)
    special_requests: str = ""
    customer_id: Optional[int] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @property
    def total(self) -> Money:
        """Σ price × quantity over the current lines"""
        total = Money.zero()
        for item in self.items:
            total = total + item.line_total
        return total

    @property
    def total_amount(self) -> Decimal:
        return self.total.amount

    @property
    def elapsed_origin(self) -> Optional[datetime]:
        """The later of created_at/updated_at; the board timer counts from here"""
        stamps = [stamp for stamp in (self.created_at, self.updated_at) if stamp]
        return max(stamps) if stamps else None

    def elapsed(self, now: datetime) -> ElapsedTime:
        origin = self.elapsed_origin
        if origin is None:
            return ElapsedTime(0, 0)
        return ElapsedTime.between(origin, now)

    def touch(self, at: Optional[datetime] = None) -> None:
        self.updated_at = at or utc_now()

    def find_item(self, item_id: int) -> Optional[OrderItem]:
        return next((item for item in self.items if item.id == item_id), None)

    def add_item(self, menu_item: MenuItem, at: Optional[datetime] = None) -> OrderItem:
        """Add one unit of a menu item; an existing line is incremented"""
        for item in self.items:
            if item.menu_item_id == menu_item.id:
                item.quantity += 1
                self.touch(at)
                return item

        line = OrderItem(
            id=max((item.id for item in self.items), default=0) + 1,
            menu_item_id=menu_item.id,
            menu_item_name=menu_item.name,
            quantity=1,
            price=menu_item.price,
        )
        self.items.append(line)
        self.touch(at)
        return line

    def update_item_quantity(
        self, item_id: int, quantity: int, at: Optional[datetime] = None
    ) -> bool:
        """Set a line's quantity; zero or below removes the line.

        Returns False and leaves the order untouched when nothing changed.
        """
        item = self.find_item(item_id)
        if item is None:
            return False
        if quantity <= 0:
            self.items = [line for line in self.items if line.id != item_id]
        elif item.quantity == quantity:
            return False
        else:
            item.quantity = quantity
        self.touch(at)
        return True

    @classmethod
    def from_record(cls, record: Dict[str, Any]) -> "Order":
        return cls(
            id=optional_int(record.get("id")),
            order_number=record.get("order_number") or "",
            customer_name=record.get("customer_name") or "",
            table_number=record.get("table_number") or "",
            order_type=OrderType(record.get("order_type") or OrderType.DINE_IN.value),
            status=OrderStatus.parse(record.get("status") or OrderStatus.RECEIVED.value),
            items=[OrderItem.from_record(item) for item in record.get("items") or []],
            special_requests=record.get("special_requests") or "",
            customer_id=optional_int(record.get("customer_id")),
            created_at=parse_datetime(record.get("created_at")),
            updated_at=parse_datetime(record.get("updated_at")),
        )

    def to_record(self) -> Dict[str, Any]:
        return {
            "order_number": self.order_number,
            "customer_name": self.customer_name,
            "table_number": self.table_number,
            "order_type": self.order_type.value,
            "status": self.status.value,
            "items": [item.to_record() for item in self.items],
            "special_requests": self.special_requests,
            "total_amount": float(self.total_amount),
            "customer_id": self.customer_id,
            "created_at": format_datetime(self.created_at),
            "updated_at": format_datetime(self.updated_at),
        }
