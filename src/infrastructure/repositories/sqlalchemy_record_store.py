"""
SQLAlchemy Record Store

Concrete implementation of RecordStore using SQLAlchemy ORM.
"""

import logging
from typing import Any, Dict, List, Optional, Sequence

from sqlalchemy import select

from src.domain.repositories.record_store import (
    Collection,
    Record,
    RecordStore,
    SortSpec,
    matches_filters,
    sort_records,
)
from src.infrastructure.database.models import StoredRecord
from src.infrastructure.database.operations import DatabaseManager
from src.infrastructure.repositories.session_handler import managed_session
from src.infrastructure.utilities.exceptions import NotFoundError


class SQLAlchemyRecordStore(RecordStore):
    """SQLAlchemy implementation of RecordStore"""

    def __init__(self, database: DatabaseManager):
        self._database = database
        self._logger = logging.getLogger(self.__class__.__name__)

    async def list(
        self,
        collection: Collection,
        filters: Optional[Dict[str, Any]] = None,
        sort: Optional[Sequence[SortSpec]] = None,
    ) -> List[Record]:
        collection = Collection(collection)
        with managed_session(self._database.get_session, f"list {collection.value}") as session:
            rows = session.scalars(
                select(StoredRecord)
                .where(StoredRecord.collection == collection.value)
                .order_by(StoredRecord.id)
            ).all()
            records = [row.to_record() for row in rows]

        # Filtering and sorting on JSON fields is dialect specific, so do it here
        records = [record for record in records if matches_filters(record, filters)]
        return sort_records(records, sort)

    async def get_by_id(self, collection: Collection, record_id: int) -> Optional[Record]:
        collection = Collection(collection)
        with managed_session(self._database.get_session, f"get {collection.value}") as session:
            row = self._find(session, collection, record_id)
            if row is None:
                self._logger.info("📭 RECORD NOT FOUND: %s #%s", collection.value, record_id)
                return None
            return row.to_record()

    async def create(self, collection: Collection, fields: Record) -> Record:
        collection = Collection(collection)
        data = {key: value for key, value in fields.items() if key != "id"}
        with managed_session(self._database.get_session, f"create {collection.value}") as session:
            row = StoredRecord(collection=collection.value, data=data)
            session.add(row)
            session.flush()
            record = row.to_record()

        self._logger.info("🆕 RECORD CREATED: %s #%s", collection.value, record["id"])
        return record

    async def update(self, collection: Collection, record_id: int, fields: Record) -> Record:
        collection = Collection(collection)
        changes = {key: value for key, value in fields.items() if key != "id"}
        with managed_session(self._database.get_session, f"update {collection.value}") as session:
            row = self._find(session, collection, record_id)
            if row is None:
                raise NotFoundError(f"{collection.value} {record_id} not found")
            # Reassign so the JSON column is flagged as modified
            row.data = {**(row.data or {}), **changes}
            record = row.to_record()

        self._logger.info("✏️ RECORD UPDATED: %s #%s", collection.value, record_id)
        return record

    async def delete(self, collection: Collection, record_id: int) -> bool:
        collection = Collection(collection)
        with managed_session(self._database.get_session, f"delete {collection.value}") as session:
            row = self._find(session, collection, record_id)
            if row is None:
                raise NotFoundError(f"{collection.value} {record_id} not found")
            session.delete(row)

        self._logger.info("🗑️ RECORD DELETED: %s #%s", collection.value, record_id)
        return True

    @staticmethod
    def _find(session, collection: Collection, record_id: int) -> Optional[StoredRecord]:
        return session.scalars(
            select(StoredRecord).where(
                StoredRecord.collection == collection.value,
                StoredRecord.id == int(record_id),
            )
        ).first()
