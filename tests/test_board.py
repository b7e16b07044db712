"""
Board coordinator and ticker tests
"""

import asyncio
from decimal import Decimal
from unittest.mock import AsyncMock, MagicMock

import pytest

from src.application.dtos.order_dtos import DragEndEvent, OrderDraft, OrderItemDraft
from src.application.services.board_ticker import BoardTicker
from src.domain.entities.order_entity import OrderStatus


async def place_order(order_lifecycle, customer="Ana"):
    draft = OrderDraft(
        customer_name=customer,
        table_number="Table 5",
        items=[OrderItemDraft(menu_item_id=7, menu_item_name="Tiramisu", price=Decimal("12.50"))],
    )
    return (await order_lifecycle.create_order(draft)).data


class TestBoardCoordinator:
    """Drag and keyboard gestures"""

    @pytest.mark.asyncio
    async def test_columns_cover_every_status(self, board, order_lifecycle):
        order = await place_order(order_lifecycle)

        columns = board.columns()

        assert list(columns) == OrderStatus.ordered()
        assert [o.id for o in columns[OrderStatus.RECEIVED]] == [order.id]
        assert columns[OrderStatus.SERVED] == []

    @pytest.mark.asyncio
    async def test_drop_on_other_column_sets_status(self, board, order_lifecycle):
        order = await place_order(order_lifecycle)

        result = await board.handle_drag_end(DragEndEvent(order.id, "ready"))

        assert result.success is True
        assert order_lifecycle.find_order(order.id).status is OrderStatus.READY

    @pytest.mark.asyncio
    async def test_drop_on_same_column_is_noop(self, board, order_lifecycle, store):
        order = await place_order(order_lifecycle)

        assert await board.handle_drag_end(DragEndEvent(order.id, "received")) is None
        assert store.calls_for("update") == []

    @pytest.mark.asyncio
    async def test_cancelled_drag_leaves_state(self, board, order_lifecycle, store, notifier):
        order = await place_order(order_lifecycle)
        notifier.messages.clear()

        assert await board.handle_drag_end(DragEndEvent(order.id, None)) is None
        assert await board.handle_drag_end(DragEndEvent(order.id, "outside")) is None

        assert order_lifecycle.find_order(order.id).status is OrderStatus.RECEIVED
        assert store.calls_for("update") == []
        assert notifier.messages == []

    @pytest.mark.asyncio
    async def test_drop_on_card_uses_its_column(self, board, order_lifecycle):
        first = await place_order(order_lifecycle)
        second = await place_order(order_lifecycle, "Ben")
        await order_lifecycle.set_status(second.id, "preparing")

        await board.handle_drag_end(DragEndEvent(first.id, second.id))

        assert order_lifecycle.find_order(first.id).status is OrderStatus.PREPARING

    @pytest.mark.asyncio
    async def test_keyboard_move_matches_drag(self, board, order_lifecycle):
        order = await place_order(order_lifecycle)

        await board.handle_keyboard_move(order.id, "next")
        assert order_lifecycle.find_order(order.id).status is OrderStatus.PREPARING

        await board.handle_keyboard_move(order.id, "previous")
        assert order_lifecycle.find_order(order.id).status is OrderStatus.RECEIVED

    @pytest.mark.asyncio
    async def test_keyboard_move_past_edge_is_noop(self, board, order_lifecycle, store):
        order = await place_order(order_lifecycle)

        assert await board.handle_keyboard_move(order.id, "previous") is None
        assert store.calls_for("update") == []

    @pytest.mark.asyncio
    async def test_keyboard_move_bad_direction(self, board):
        with pytest.raises(ValueError):
            await board.handle_keyboard_move(1, "sideways")


class TestBoardTicker:
    """Periodic elapsed-time recomputation"""

    @pytest.mark.asyncio
    async def test_tick_passes_snapshot(self, order_lifecycle, clock):
        order = await place_order(order_lifecycle)
        clock.advance(5)
        callback = MagicMock()
        ticker = BoardTicker(order_lifecycle, callback, interval=1)

        snapshot = await ticker.tick()

        callback.assert_called_once_with(snapshot)
        assert snapshot[order.id].seconds == 5

    @pytest.mark.asyncio
    async def test_async_callback_awaited(self, order_lifecycle):
        callback = AsyncMock()
        ticker = BoardTicker(order_lifecycle, callback, interval=1)

        await ticker.tick()

        callback.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_callback_error_does_not_stop_ticking(self, order_lifecycle):
        callback = MagicMock(side_effect=RuntimeError("render failed"))
        ticker = BoardTicker(order_lifecycle, callback, interval=1)

        await ticker.tick()
        await ticker.tick()

        assert callback.call_count == 2
        assert ticker.ticks == 2

    @pytest.mark.asyncio
    async def test_context_manager_starts_and_stops(self, order_lifecycle):
        ticks = []
        async with BoardTicker(order_lifecycle, ticks.append, interval=0.01) as ticker:
            assert ticker.running
            await asyncio.sleep(0.05)

        assert not ticker.running
        assert len(ticks) >= 1
        count = len(ticks)
        await asyncio.sleep(0.03)
        assert len(ticks) == count

    @pytest.mark.asyncio
    async def test_stop_on_exception_inside_block(self, order_lifecycle):
        ticker = BoardTicker(order_lifecycle, lambda snapshot: None, interval=0.01)
        with pytest.raises(KeyError):
            async with ticker:
                raise KeyError("owner went away")
        assert not ticker.running

    def test_interval_must_be_positive(self, order_lifecycle):
        with pytest.raises(ValueError):
            BoardTicker(order_lifecycle, lambda snapshot: None, interval=0)
