"""
Customer domain entity

Customers an order can optionally be linked to.
"""

from dataclasses import dataclass
from typing import Any, Dict, Optional

from src.domain.entities.record_fields import optional_int


@dataclass
class Customer:
    """Customer domain entity"""

    id: Optional[int]
    name: str
    email: str = ""
    phone: str = ""

    def __post_init__(self):
        if not self.name or not self.name.strip():
            raise ValueError("Customer name cannot be empty")

    def __str__(self) -> str:
        return f"Customer(id={self.id}, name={self.name})"

    @classmethod
    def from_record(cls, record: Dict[str, Any]) -> "Customer":
        return cls(
            id=optional_int(record.get("id")),
            name=record.get("name") or "",
            email=record.get("email") or "",
            phone=record.get("phone") or "",
        )

    def to_record(self) -> Dict[str, Any]:
        return {"name": self.name, "email": self.email, "phone": self.phone}
