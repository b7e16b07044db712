"""
Table Entity - floor plan placement and service status
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Optional

from src.domain.entities.record_fields import optional_int
from src.domain.value_objects.floor_position import FloorPosition


class TableShape(str, Enum):
    ROUND = "round"
    SQUARE = "square"
    RECTANGLE = "rectangle"


class TableStatus(str, Enum):
    AVAILABLE = "available"
    OCCUPIED = "occupied"
    RESERVED = "reserved"
    CLEANING = "cleaning"

    @classmethod
    def parse(cls, value: "str | TableStatus") -> "TableStatus":
        try:
            return cls(value)
        except ValueError as e:
            allowed = ", ".join(status.value for status in cls)
            raise ValueError(f"Unknown table status '{value}'. Expected one of: {allowed}") from e


@dataclass
class Table:
    """A table on the floor plan; position and status change independently"""

    id: Optional[int]
    number: int
    seats: int
    shape: TableShape = TableShape.SQUARE
    status: TableStatus = TableStatus.AVAILABLE
    server: Optional[str] = None
    x: int = 0
    y: int = 0

    def __post_init__(self):
        if self.seats < 1:
            raise ValueError("A table needs at least one seat")
        # Validates the coordinates
        FloorPosition(self.x, self.y)

    @property
    def position(self) -> FloorPosition:
        return FloorPosition(self.x, self.y)

    def move_to(self, position: FloorPosition) -> None:
        self.x, self.y = position.x, position.y

    @classmethod
    def from_record(cls, record: Dict[str, Any]) -> "Table":
        return cls(
            id=optional_int(record.get("id")),
            number=int(record.get("number") or 0),
            seats=int(record.get("seats") or 1),
            shape=TableShape(record.get("shape") or TableShape.SQUARE.value),
            status=TableStatus.parse(record.get("status") or TableStatus.AVAILABLE.value),
            server=record.get("server") or None,
            x=int(record.get("x") or 0),
            y=int(record.get("y") or 0),
        )

    def to_record(self) -> Dict[str, Any]:
        return {
            "number": self.number,
            "seats": self.seats,
            "shape": self.shape.value,
            "status": self.status.value,
            "server": self.server,
            "x": self.x,
            "y": self.y,
        }
