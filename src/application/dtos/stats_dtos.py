"""
Aggregates shown on the board header, floor plan and dashboard
"""

from dataclasses import asdict, dataclass
from decimal import Decimal
from typing import Any, Dict


@dataclass(frozen=True)
class OrderStats:
    total: int
    today: int
    pending: int
    preparing: int
    ready: int
    completed: int
    total_revenue: Decimal
    today_revenue: Decimal

    def to_dict(self) -> Dict[str, Any]:
        data = asdict(self)
        data["total_revenue"] = float(self.total_revenue)
        data["today_revenue"] = float(self.today_revenue)
        return data


@dataclass(frozen=True)
class TableStats:
    total: int
    available: int
    occupied: int
    reserved: int
    cleaning: int

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class MenuMetrics:
    total_items: int
    active_items: int
    categories: int

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)
