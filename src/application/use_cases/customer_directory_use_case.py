"""
Customer Directory Use Case

Read-only lookup of customers that orders may be linked to.
"""

from src.application.dtos.operation_result import OperationResult
from src.application.interfaces.notifications import NotificationService
from src.application.use_cases.operator_use_case import OperatorUseCase
from src.domain.entities.customer_entity import Customer
from src.domain.repositories.record_store import Collection, RecordStore, SortSpec
from src.infrastructure.utilities.exceptions import BackOfficeError, NotFoundError


class CustomerDirectoryUseCase(OperatorUseCase):
    """Use case for browsing customers"""

    def __init__(self, record_store: RecordStore, notification_service: NotificationService):
        super().__init__(notification_service)
        self._record_store = record_store

    async def list_customers(self, search: str = "") -> OperationResult:
        try:
            records = await self._record_store.list(Collection.CUSTOMER, sort=[SortSpec("name")])
            customers = [Customer.from_record(record) for record in records]
            needle = (search or "").strip().lower()
            if needle:
                customers = [
                    c for c in customers
                    if needle in c.name.lower() or needle in c.email.lower()
                ]
            return OperationResult.ok(customers)
        except (BackOfficeError, ValueError, TypeError) as e:
            return self._fail("list customers", e)

    async def get_customer(self, customer_id: int) -> OperationResult:
        try:
            record = await self._record_store.get_by_id(Collection.CUSTOMER, customer_id)
            if record is None:
                raise NotFoundError(
                    f"Customer not found: {customer_id}", "Customer not found."
                )
            return OperationResult.ok(Customer.from_record(record))
        except (BackOfficeError, ValueError, TypeError) as e:
            return self._fail("get customer", e)
