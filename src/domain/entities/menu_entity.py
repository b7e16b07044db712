# pylint: disable=too-many-instance-attributes
"""
Menu entities - categories and the items filed under them
"""

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from typing import Any, Dict, Optional

from src.domain.entities.record_fields import (
    format_datetime,
    optional_int,
    parse_datetime,
)
from src.domain.value_objects.money import to_decimal


@dataclass
class Category:
    """Menu category; display_order defines the presentation sort"""

    id: Optional[int]
    name: str
    display_order: int = 1
    item_count: int = 0
    is_active: bool = True

    def __post_init__(self):
        if not self.name or not self.name.strip():
            raise ValueError("Category name cannot be empty")

    def has_items(self) -> bool:
        return self.item_count > 0

    @classmethod
    def from_record(cls, record: Dict[str, Any]) -> "Category":
        return cls(
            id=optional_int(record.get("id")),
            name=record.get("name") or "",
            display_order=int(record.get("display_order") or 0),
            item_count=int(record.get("item_count") or 0),
            is_active=bool(record.get("is_active", True)),
        )

    def to_record(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "display_order": self.display_order,
            "item_count": self.item_count,
            "is_active": self.is_active,
        }


@dataclass
class MenuItem:
    """Menu item; belongs to exactly one category at a time"""

    id: Optional[int]
    name: str
    price: Decimal
    category_id: int
    description: str = ""
    is_available: bool = True
    image_url: str = ""
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    def __post_init__(self):
        """Validate the menu item after initialization"""
        if not self.name or not self.name.strip():
            raise ValueError("Menu item name cannot be empty")

        self.price = to_decimal(self.price)
        if self.price < 0:
            raise ValueError("Menu item price cannot be negative")

        if self.category_id is None:
            raise ValueError("Menu item category is required")

    @classmethod
    def from_record(cls, record: Dict[str, Any]) -> "MenuItem":
        return cls(
            id=optional_int(record.get("id")),
            name=record.get("name") or "",
            price=record.get("price"),
            category_id=optional_int(record.get("category_id")),
            description=record.get("description") or "",
            is_available=bool(record.get("is_available", True)),
            image_url=record.get("image_url") or "",
            created_at=parse_datetime(record.get("created_at")),
            updated_at=parse_datetime(record.get("updated_at")),
        )

    def to_record(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "price": float(self.price),
            "description": self.description,
            "category_id": self.category_id,
            "is_available": self.is_available,
            "image_url": self.image_url,
            "created_at": format_datetime(self.created_at),
            "updated_at": format_datetime(self.updated_at),
        }
