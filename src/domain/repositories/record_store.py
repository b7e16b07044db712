"""
Record store interface

Defines the contract for the generic record persistence port. Every
collection (categories, menu items, orders, tables, customers) goes through
the same five operations; records are plain dicts keyed by canonical
snake_case field names.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, List, Optional, Sequence

Record = Dict[str, Any]


class Collection(str, Enum):
    """Named record collections"""

    CATEGORY = "category"
    MENU_ITEM = "menu_item"
    ORDER = "order"
    TABLE = "table"
    CUSTOMER = "customer"


@dataclass(frozen=True)
class SortSpec:
    """Sort by a single field"""

    field: str
    descending: bool = False


class RecordStore(ABC):
    """Repository interface for record collections"""

    @abstractmethod
    async def list(
        self,
        collection: Collection,
        filters: Optional[Dict[str, Any]] = None,
        sort: Optional[Sequence[SortSpec]] = None,
    ) -> List[Record]:
        """List records, optionally filtered by field equality and sorted"""

    @abstractmethod
    async def get_by_id(self, collection: Collection, record_id: int) -> Optional[Record]:
        """Get a record by id, None when it does not exist"""

    @abstractmethod
    async def create(self, collection: Collection, fields: Record) -> Record:
        """Create a record; the store assigns the id"""

    @abstractmethod
    async def update(self, collection: Collection, record_id: int, fields: Record) -> Record:
        """Merge fields into an existing record (NotFoundError when missing)"""

    @abstractmethod
    async def delete(self, collection: Collection, record_id: int) -> bool:
        """Delete a record (NotFoundError when missing)"""


def matches_filters(record: Record, filters: Optional[Dict[str, Any]]) -> bool:
    """Field-equality predicate shared by stores that filter in Python"""
    if not filters:
        return True
    return all(record.get(key) == value for key, value in filters.items())


def sort_records(records: List[Record], sort: Optional[Sequence[SortSpec]]) -> List[Record]:
    """Stable multi-key sort; missing values sort first"""
    for spec in reversed(list(sort or [])):
        records.sort(
            key=lambda record, name=spec.field: (
                record.get(name) is not None,
                record.get(name) if record.get(name) is not None else 0,
            ),
            reverse=spec.descending,
        )
    return records
