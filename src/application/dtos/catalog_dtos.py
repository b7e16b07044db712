"""
Catalog and floor plan DTOs
"""

from dataclasses import asdict, dataclass
from decimal import Decimal
from typing import Optional

from src.domain.entities.table_entity import TableShape


@dataclass
class MenuItemDraft:
    """Menu item form contents"""

    name: str
    price: Decimal
    category_id: Optional[int]
    description: str = ""
    is_available: bool = True
    image_url: str = ""


@dataclass
class TableDraft:
    """New table placed on the floor plan"""

    seats: int
    shape: TableShape = TableShape.SQUARE
    x: int = 0
    y: int = 0


@dataclass(frozen=True)
class FloorPlanTemplate:
    """Preset layout offered when starting a floor plan"""

    id: str
    name: str
    tables: int

    def to_dict(self) -> dict:
        return asdict(self)
