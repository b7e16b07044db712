"""
Table Layout Use Case

Floor plan management. Position and status changes are persisted before the
local state moves, so a failed call leaves the floor plan untouched.
"""

from typing import List, Optional

from src.application.derived_views import table_stats
from src.application.dtos.catalog_dtos import FloorPlanTemplate, TableDraft
from src.application.dtos.operation_result import OperationResult
from src.application.dtos.stats_dtos import TableStats
from src.application.interfaces.notifications import (
    ConfirmationService,
    NotificationService,
)
from src.application.use_cases.operator_use_case import Clock, OperatorUseCase
from src.domain.entities.record_fields import utc_now
from src.domain.entities.table_entity import Table, TableShape, TableStatus
from src.domain.repositories.record_store import Collection, RecordStore, SortSpec
from src.infrastructure.utilities.exceptions import (
    BackOfficeError,
    NotFoundError,
    TableNotFoundError,
    ValidationError,
)

FLOOR_PLAN_TEMPLATES = (
    FloorPlanTemplate("casual", "Casual Dining", 12),
    FloorPlanTemplate("fine", "Fine Dining", 8),
    FloorPlanTemplate("cafe", "Cafe Style", 16),
    FloorPlanTemplate("bar", "Bar & Grill", 10),
)

EDITABLE_FIELDS = ("number", "seats", "shape", "status", "server", "x", "y")
NULLABLE_FIELDS = ("server",)


class TableLayoutUseCase(OperatorUseCase):
    """Use case for the floor plan"""

    def __init__(
        self,
        record_store: RecordStore,
        notification_service: NotificationService,
        confirmation_service: Optional[ConfirmationService] = None,
        clock: Clock = utc_now,
    ):
        super().__init__(notification_service, confirmation_service, clock)
        self._record_store = record_store
        self.tables: List[Table] = []

    def find_table(self, table_id: int) -> Optional[Table]:
        return next((table for table in self.tables if table.id == table_id), None)

    def _require(self, table_id: int) -> Table:
        table = self.find_table(table_id)
        if table is None:
            raise TableNotFoundError(table_id)
        return table

    async def _persist(self, table_id: int, fields: dict) -> None:
        try:
            await self._record_store.update(Collection.TABLE, table_id, fields)
        except NotFoundError as e:
            raise TableNotFoundError(table_id) from e

    async def load_tables(self) -> OperationResult:
        try:
            records = await self._record_store.list(Collection.TABLE, sort=[SortSpec("number")])
            self.tables = [Table.from_record(record) for record in records]
            self._logger.info("🪑 TABLES LOADED: %d", len(self.tables))
            return OperationResult.ok(self.tables)
        except (BackOfficeError, ValueError, TypeError) as e:
            return self._fail("load tables", e)

    async def create_table(self, draft: TableDraft) -> OperationResult:
        """New tables get the next number, no server and status available"""
        try:
            table = Table(
                id=None,
                number=max((t.number for t in self.tables), default=0) + 1,
                seats=draft.seats,
                shape=TableShape(draft.shape),
                status=TableStatus.AVAILABLE,
                server=None,
                x=draft.x,
                y=draft.y,
            )
            record = await self._record_store.create(Collection.TABLE, table.to_record())
            created = Table.from_record(record)
            self.tables.append(created)

            self._logger.info("✅ TABLE CREATED: #%s (%s seats)", created.number, created.seats)
            return self._succeed(f"Table {created.number} added successfully!", created)

        except (BackOfficeError, ValueError, TypeError) as e:
            return self._fail("create table", e)

    async def update_table(self, table_id: int, **fields) -> OperationResult:
        try:
            unknown = set(fields) - set(EDITABLE_FIELDS)
            if unknown:
                raise ValidationError(f"Unknown table fields: {', '.join(sorted(unknown))}")
            for name, value in fields.items():
                if value is None and name not in NULLABLE_FIELDS:
                    raise ValidationError(f"Table {name} cannot be empty", field=name)

            current = self._require(table_id)
            merged = {**current.to_record(), **fields, "id": table_id}
            # Round-trip through the entity so invalid values never reach the store
            updated = Table.from_record(merged)

            await self._persist(table_id, {key: updated.to_record()[key] for key in fields})
            self.tables = [updated if t.id == table_id else t for t in self.tables]
            return self._succeed("Table updated successfully!", updated)

        except (BackOfficeError, ValueError, TypeError) as e:
            return self._fail("update table", e)

    async def delete_table(
        self, table_id: int, confirmation_service: Optional[ConfirmationService] = None
    ) -> OperationResult:
        try:
            table = self._require(table_id)
        except BackOfficeError as e:
            return self._fail("delete table", e)

        if not self._confirm(
            f"Are you sure you want to delete table {table.number}?", confirmation_service
        ):
            return self._cancelled("Delete table")

        try:
            try:
                await self._record_store.delete(Collection.TABLE, table_id)
            except NotFoundError as e:
                raise TableNotFoundError(table_id) from e

            self.tables = [t for t in self.tables if t.id != table_id]
            self._logger.info("🗑️ TABLE DELETED: %s", table_id)
            return self._succeed("Table deleted successfully!", table_id)

        except BackOfficeError as e:
            return self._fail("delete table", e)

    async def drag_table(self, table_id: int, dx: int, dy: int) -> OperationResult:
        """Move a table by a pointer delta; coordinates clamp at zero"""
        try:
            table = self._require(table_id)
            if dx == 0 and dy == 0:
                return OperationResult.ok(table)

            target = table.position.moved_by(dx, dy)
            await self._persist(table_id, {"x": target.x, "y": target.y})

            table.move_to(target)
            self._logger.info("🖱️ TABLE MOVED: %s → (%d, %d)", table_id, target.x, target.y)
            return self._succeed(None, table)

        except (BackOfficeError, ValueError, TypeError) as e:
            return self._fail("move table", e)

    async def set_table_status(self, table_id: int, status: "str | TableStatus") -> OperationResult:
        try:
            table = self._require(table_id)
            new_status = TableStatus.parse(status)
            await self._persist(table_id, {"status": new_status.value})

            table.status = new_status
            return self._succeed(f"Table {table.number} marked as {new_status.value}", table)

        except (BackOfficeError, ValueError, TypeError) as e:
            return self._fail("update table status", e)

    def stats(self) -> TableStats:
        return table_stats(self.tables)

    @staticmethod
    def floor_plan_templates() -> List[FloorPlanTemplate]:
        return list(FLOOR_PLAN_TEMPLATES)
