"""
Order Lifecycle Use Case

Holds the in-process view of all orders and drives status changes, line item
edits and the per-order elapsed time shown on the board.
"""

from typing import Dict, List, Optional

from src.application.derived_views import filter_orders, order_stats
from src.application.dtos.operation_result import OperationResult
from src.application.dtos.order_dtos import OrderDraft
from src.application.dtos.stats_dtos import OrderStats
from src.application.interfaces.notifications import (
    ConfirmationService,
    NotificationService,
)
from src.application.use_cases.operator_use_case import Clock, OperatorUseCase
from src.domain.entities.menu_entity import MenuItem
from src.domain.entities.order_entity import Order, OrderItem, OrderStatus
from src.domain.entities.record_fields import format_datetime, utc_now
from src.domain.repositories.record_store import Collection, RecordStore, SortSpec
from src.domain.value_objects.elapsed_time import ElapsedTime
from src.domain.value_objects.order_number import OrderNumber
from src.infrastructure.utilities.constants import BoardSettings
from src.infrastructure.utilities.exceptions import (
    BackOfficeError,
    NotFoundError,
    OrderNotFoundError,
    ValidationError,
)

# Seating labels offered by the new-order form
SEATING_LOCATIONS = (
    "Table 1", "Table 2", "Table 3", "Table 4", "Table 5",
    "Table 6", "Table 7", "Table 8", "Table 9", "Table 10",
    "Bar Seat 1", "Bar Seat 2", "Bar Seat 3", "Bar Seat 4",
    "Patio Table 1", "Patio Table 2", "Patio Table 3",
)


class OrderLifecycleUseCase(OperatorUseCase):
    """Use case for the order board"""

    def __init__(
        self,
        record_store: RecordStore,
        notification_service: NotificationService,
        confirmation_service: Optional[ConfirmationService] = None,
        clock: Clock = utc_now,
    ):
        super().__init__(notification_service, confirmation_service, clock)
        self._record_store = record_store
        self.orders: List[Order] = []
        self.selected_order_id: Optional[int] = None

    # ------------------------------------------------------------------
    # Loading and lookups
    # ------------------------------------------------------------------

    async def load_orders(self) -> OperationResult:
        """Replace the local list with the backend's, newest first"""
        try:
            await self._refresh()
            self._logger.info("📋 ORDERS LOADED: %d", len(self.orders))
            return OperationResult.ok(self.orders)
        except (BackOfficeError, ValueError, TypeError) as e:
            return self._fail("load orders", e)

    async def _refresh(self) -> None:
        records = await self._record_store.list(
            Collection.ORDER, sort=[SortSpec("created_at", descending=True)]
        )
        self.orders = [Order.from_record(record) for record in records]
        if self.selected_order_id is not None and self.find_order(self.selected_order_id) is None:
            self.selected_order_id = None

    def find_order(self, order_id: int) -> Optional[Order]:
        return next((order for order in self.orders if order.id == order_id), None)

    def select_order(self, order_id: Optional[int]) -> Optional[Order]:
        """Point the detail panel at an order (None clears it)"""
        order = self.find_order(order_id) if order_id is not None else None
        self.selected_order_id = order.id if order else None
        return order

    @property
    def selected_order(self) -> Optional[Order]:
        if self.selected_order_id is None:
            return None
        return self.find_order(self.selected_order_id)

    def get_orders_by_status(self, status: "str | OrderStatus") -> List[Order]:
        wanted = OrderStatus.parse(status)
        return [order for order in self.orders if order.status == wanted]

    def filtered_orders(
        self, search: str = "", status: str = BoardSettings.STATUS_FILTER_ALL
    ) -> List[Order]:
        return filter_orders(self.orders, search, status)

    def stats(self) -> OrderStats:
        return order_stats(self.orders, self._clock().date())

    @staticmethod
    def seating_locations() -> List[str]:
        return list(SEATING_LOCATIONS)

    # ------------------------------------------------------------------
    # Creation
    # ------------------------------------------------------------------

    async def create_order(self, draft: OrderDraft) -> OperationResult:
        """Validate, number and persist a new order"""
        self._logger.info("📝 ORDER CREATION: %s at %s", draft.customer_name, draft.table_number)

        try:
            order = self._build_order(draft)
            record = await self._record_store.create(Collection.ORDER, order.to_record())
            created = Order.from_record(record)
            self.orders.insert(0, created)

            self._logger.info(
                "✅ ORDER CREATED: %s total=%s", created.order_number, created.total_amount
            )
            return self._succeed(f"Order {created.order_number} created successfully!", created)

        except (BackOfficeError, ValueError, TypeError) as e:
            return self._fail("create order", e)

    def _build_order(self, draft: OrderDraft) -> Order:
        if not (draft.customer_name or "").strip():
            raise ValidationError("Customer name is required", field="customer_name")
        if not (draft.table_number or "").strip():
            raise ValidationError("Table number is required", field="table_number")
        if not draft.items:
            raise ValidationError("An order needs at least one item", field="items")

        lines: List[OrderItem] = []
        for item_draft in draft.items:
            if item_draft.quantity < 1:
                raise ValidationError("Item quantity must be at least 1", field="items")
            existing = next(
                (line for line in lines if line.menu_item_id == item_draft.menu_item_id), None
            )
            if existing:
                existing.quantity += item_draft.quantity
                continue
            lines.append(
                OrderItem(
                    id=len(lines) + 1,
                    menu_item_id=item_draft.menu_item_id,
                    menu_item_name=item_draft.menu_item_name,
                    quantity=item_draft.quantity,
                    price=item_draft.price,
                    special_requests=item_draft.special_requests,
                )
            )

        now = self._clock()
        return Order(
            id=None,
            order_number=OrderNumber.from_timestamp(now).value,
            customer_name=draft.customer_name.strip(),
            table_number=draft.table_number.strip(),
            order_type=draft.order_type,
            status=OrderStatus.RECEIVED,
            items=lines,
            special_requests=draft.special_requests or "",
            customer_id=draft.customer_id,
            created_at=now,
            updated_at=now,
        )

    # ------------------------------------------------------------------
    # Status transitions
    # ------------------------------------------------------------------

    async def set_status(self, order_id: int, new_status: "str | OrderStatus") -> OperationResult:
        """Move an order to any status; the list is reloaded afterwards"""
        self._logger.info("📝 STATUS UPDATE: Order %s → %s", order_id, new_status)

        try:
            status = OrderStatus.parse(new_status)
            try:
                await self._record_store.update(
                    Collection.ORDER,
                    order_id,
                    {"status": status.value, "updated_at": format_datetime(self._clock())},
                )
            except NotFoundError as e:
                raise OrderNotFoundError(order_id) from e

            await self._refresh()
            self._logger.info("✅ STATUS UPDATED: Order %s → %s", order_id, status.value)
            return self._succeed(
                f"Order status updated to {status.value.title()}", self.find_order(order_id)
            )

        except (BackOfficeError, ValueError, TypeError) as e:
            return self._fail("update order status", e)

    # ------------------------------------------------------------------
    # Line items (local until saved)
    # ------------------------------------------------------------------

    def add_item(self, order: Order, menu_item: MenuItem) -> Order:
        order.add_item(menu_item, at=self._clock())
        return order

    def update_item_quantity(self, order: Order, item_id: int, quantity: int) -> Order:
        order.update_item_quantity(item_id, quantity, at=self._clock())
        return order

    async def save_order(self, order: Order) -> OperationResult:
        """Persist local edits to an existing order"""
        try:
            if order.id is None:
                raise ValidationError("Only existing orders can be saved")
            if not order.items:
                raise ValidationError("An order needs at least one item", field="items")

            order.touch(self._clock())
            fields = order.to_record()
            fields.pop("created_at", None)
            try:
                await self._record_store.update(Collection.ORDER, order.id, fields)
            except NotFoundError as e:
                raise OrderNotFoundError(order.id) from e

            await self._refresh()
            return self._succeed("Order updated successfully!", self.find_order(order.id))

        except (BackOfficeError, ValueError, TypeError) as e:
            return self._fail("save order", e)

    # ------------------------------------------------------------------
    # Deletion
    # ------------------------------------------------------------------

    async def delete_order(
        self, order_id: int, confirmation_service: Optional[ConfirmationService] = None
    ) -> OperationResult:
        if not self._confirm("Are you sure you want to delete this order?", confirmation_service):
            return self._cancelled("Delete order")

        try:
            try:
                await self._record_store.delete(Collection.ORDER, order_id)
            except NotFoundError as e:
                raise OrderNotFoundError(order_id) from e

            self.orders = [order for order in self.orders if order.id != order_id]
            if self.selected_order_id == order_id:
                self.selected_order_id = None

            self._logger.info("🗑️ ORDER DELETED: %s", order_id)
            return self._succeed("Order deleted successfully!", order_id)

        except (BackOfficeError, ValueError, TypeError) as e:
            return self._fail("delete order", e)

    # ------------------------------------------------------------------
    # Elapsed time
    # ------------------------------------------------------------------

    def compute_elapsed(self, order: Order, now=None) -> ElapsedTime:
        return order.elapsed(now or self._clock())

    def elapsed_snapshot(self, now=None) -> Dict[int, ElapsedTime]:
        """Elapsed time for every order in view"""
        now = now or self._clock()
        # Iterate over a copy; the list may be replaced between ticks
        return {order.id: order.elapsed(now) for order in list(self.orders)}
