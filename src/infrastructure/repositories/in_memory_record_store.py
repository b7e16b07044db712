"""
In-memory Record Store

Process-local implementation of RecordStore used for offline development
and as the test double. Records are deep-copied on the way in and out so
callers can never mutate stored state by accident.
"""

import copy
import logging
from collections import defaultdict
from typing import Any, Dict, List, Optional, Sequence

from src.domain.repositories.record_store import (
    Collection,
    Record,
    RecordStore,
    SortSpec,
    matches_filters,
    sort_records,
)
from src.infrastructure.utilities.exceptions import NotFoundError


class InMemoryRecordStore(RecordStore):
    """Dict-backed implementation of RecordStore"""

    def __init__(self, seed: Optional[Dict[Collection, List[Record]]] = None):
        self._records: Dict[Collection, Dict[int, Record]] = defaultdict(dict)
        self._next_ids: Dict[Collection, int] = defaultdict(lambda: 1)
        self._logger = logging.getLogger(self.__class__.__name__)

        for collection, records in (seed or {}).items():
            for record in records:
                self._insert(Collection(collection), record)

    def _insert(self, collection: Collection, fields: Record) -> Record:
        record = copy.deepcopy(fields)
        record_id = record.get("id")
        if record_id is None:
            record_id = self._next_ids[collection]
        record_id = int(record_id)
        record["id"] = record_id
        self._records[collection][record_id] = record
        self._next_ids[collection] = max(self._next_ids[collection], record_id + 1)
        return copy.deepcopy(record)

    async def list(
        self,
        collection: Collection,
        filters: Optional[Dict[str, Any]] = None,
        sort: Optional[Sequence[SortSpec]] = None,
    ) -> List[Record]:
        records = [
            copy.deepcopy(record)
            for record in self._records[Collection(collection)].values()
            if matches_filters(record, filters)
        ]
        return sort_records(records, sort)

    async def get_by_id(self, collection: Collection, record_id: int) -> Optional[Record]:
        record = self._records[Collection(collection)].get(int(record_id))
        return copy.deepcopy(record) if record is not None else None

    async def create(self, collection: Collection, fields: Record) -> Record:
        fields = {key: value for key, value in fields.items() if key != "id"}
        record = self._insert(Collection(collection), fields)
        self._logger.debug("🆕 RECORD CREATED: %s #%s", collection, record["id"])
        return record

    async def update(self, collection: Collection, record_id: int, fields: Record) -> Record:
        records = self._records[Collection(collection)]
        record_id = int(record_id)
        if record_id not in records:
            raise NotFoundError(f"{Collection(collection).value} {record_id} not found")

        changes = {key: value for key, value in fields.items() if key != "id"}
        records[record_id].update(copy.deepcopy(changes))
        self._logger.debug("✏️ RECORD UPDATED: %s #%s", collection, record_id)
        return copy.deepcopy(records[record_id])

    async def delete(self, collection: Collection, record_id: int) -> bool:
        records = self._records[Collection(collection)]
        record_id = int(record_id)
        if record_id not in records:
            raise NotFoundError(f"{Collection(collection).value} {record_id} not found")

        del records[record_id]
        self._logger.debug("🗑️ RECORD DELETED: %s #%s", collection, record_id)
        return True
