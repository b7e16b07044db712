"""
Board Coordinator

Maps drag gestures and keyboard moves on the kanban board onto status
changes. Both paths end in the same OrderLifecycleUseCase.set_status call.
"""

import logging
from typing import Dict, List, Optional, Union

from src.application.dtos.operation_result import OperationResult
from src.application.dtos.order_dtos import DragEndEvent
from src.application.use_cases.order_lifecycle_use_case import OrderLifecycleUseCase
from src.domain.entities.order_entity import Order, OrderStatus

NEXT = "next"
PREVIOUS = "previous"


class BoardCoordinator:
    """Translates board gestures into status transitions"""

    def __init__(self, order_lifecycle: OrderLifecycleUseCase):
        self._orders = order_lifecycle
        self._logger = logging.getLogger(self.__class__.__name__)

    def columns(self) -> Dict[OrderStatus, List[Order]]:
        """Every status column in lifecycle order, empty ones included"""
        board: Dict[OrderStatus, List[Order]] = {status: [] for status in OrderStatus.ordered()}
        for order in self._orders.orders:
            board[order.status].append(order)
        return board

    def _resolve_column(self, over_id: Union[str, int]) -> Optional[OrderStatus]:
        """A drop target is either a column id or another order card"""
        if isinstance(over_id, str):
            try:
                return OrderStatus(over_id)
            except ValueError:
                if not over_id.isdigit():
                    return None
                over_id = int(over_id)

        target_order = self._orders.find_order(over_id)
        return target_order.status if target_order else None

    async def handle_drag_end(self, event: DragEndEvent) -> Optional[OperationResult]:
        """Returns None when the drop does not change anything"""
        if event.over_id is None:
            self._logger.debug("DRAG CANCELLED: order %s", event.active_id)
            return None

        order = self._orders.find_order(event.active_id)
        if order is None:
            self._logger.warning("⚠️ DRAG OF UNKNOWN ORDER: %s", event.active_id)
            return None

        target = self._resolve_column(event.over_id)
        if target is None or target == order.status:
            return None

        self._logger.info("🖱️ DRAG: Order %s %s → %s", order.id, order.status.value, target.value)
        return await self._orders.set_status(order.id, target)

    async def handle_keyboard_move(self, order_id: int, direction: str) -> Optional[OperationResult]:
        """Move a card one column left or right"""
        if direction not in (NEXT, PREVIOUS):
            raise ValueError(f"Unknown direction '{direction}'")

        order = self._orders.find_order(order_id)
        if order is None:
            return None

        statuses = OrderStatus.ordered()
        index = statuses.index(order.status) + (1 if direction == NEXT else -1)
        if index < 0 or index >= len(statuses):
            return None

        return await self.handle_drag_end(DragEndEvent(order.id, statuses[index].value))
