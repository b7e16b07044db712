"""
Order board endpoints
"""

from fastapi import APIRouter, Depends, HTTPException, Request

from src.api.dependencies import get_app_container, get_confirmation
from src.api.schemas import (
    AddItemRequest,
    BoardDragRequest,
    BoardMoveRequest,
    OrderCreateRequest,
    QuantityUpdateRequest,
    StatusUpdateRequest,
    serialize,
    unwrap,
)
from src.application.dtos.order_dtos import DragEndEvent, OrderDraft, OrderItemDraft
from src.container import Container
from src.domain.entities.order_entity import Order
from src.infrastructure.services.notification_service import StaticConfirmationService
from src.infrastructure.utilities.constants import BoardSettings

router = APIRouter(prefix="/orders", tags=["orders"])


def _order_or_404(container: Container, order_id: int) -> Order:
    order = container.orders.find_order(order_id)
    if order is None:
        raise HTTPException(status_code=404, detail=f"Order #{order_id} not found.")
    return order


@router.get("")
async def list_orders(
    search: str = "",
    status: str = BoardSettings.STATUS_FILTER_ALL,
    refresh: bool = False,
    container: Container = Depends(get_app_container),
):
    if refresh:
        unwrap(await container.orders.load_orders())
    try:
        orders = container.orders.filtered_orders(search, status)
    except ValueError as e:
        raise HTTPException(status_code=422, detail=str(e)) from e
    return serialize(orders, container.config.currency)


@router.post("", status_code=201)
async def create_order(
    request: OrderCreateRequest, container: Container = Depends(get_app_container)
):
    draft = OrderDraft(
        customer_name=request.customer_name,
        table_number=request.table_number,
        items=[OrderItemDraft(**item.model_dump()) for item in request.items],
        order_type=request.order_type,
        special_requests=request.special_requests,
        customer_id=request.customer_id,
    )
    return unwrap(await container.orders.create_order(draft), container.config.currency)


@router.get("/board")
async def board(container: Container = Depends(get_app_container)):
    return serialize(container.board.columns(), container.config.currency)


@router.post("/board/drag")
async def board_drag(request: BoardDragRequest, container: Container = Depends(get_app_container)):
    result = await container.board.handle_drag_end(DragEndEvent(request.active_id, request.over_id))
    if result is None:
        return {"changed": False}
    return {"changed": True, "order": unwrap(result, container.config.currency)}


@router.post("/board/move")
async def board_move(request: BoardMoveRequest, container: Container = Depends(get_app_container)):
    result = await container.board.handle_keyboard_move(request.order_id, request.direction)
    if result is None:
        return {"changed": False}
    return {"changed": True, "order": unwrap(result, container.config.currency)}


@router.get("/elapsed")
async def elapsed(request: Request, container: Container = Depends(get_app_container)):
    """Latest ticker snapshot, or a fresh one before the first tick"""
    snapshot = getattr(request.app.state, "board_snapshot", None)
    if not snapshot:
        snapshot = container.orders.elapsed_snapshot()
    return {str(order_id): value for order_id, value in serialize(snapshot).items()}


@router.get("/stats")
async def stats(container: Container = Depends(get_app_container)):
    return container.orders.stats().to_dict()


@router.get("/seating")
async def seating(container: Container = Depends(get_app_container)):
    return container.orders.seating_locations()


@router.get("/{order_id}")
async def get_order(order_id: int, container: Container = Depends(get_app_container)):
    return serialize(_order_or_404(container, order_id), container.config.currency)


@router.patch("/{order_id}/status")
async def update_status(
    order_id: int,
    request: StatusUpdateRequest,
    container: Container = Depends(get_app_container),
):
    result = await container.orders.set_status(order_id, request.status)
    return unwrap(result, container.config.currency)


@router.post("/{order_id}/items")
async def add_item(
    order_id: int, request: AddItemRequest, container: Container = Depends(get_app_container)
):
    """Adds to the working copy; PUT /orders/{id} saves it"""
    order = _order_or_404(container, order_id)
    menu_item = container.menu_items.find_item(request.menu_item_id)
    if menu_item is None:
        raise HTTPException(status_code=404, detail="Menu item not found.")
    container.orders.add_item(order, menu_item)
    return serialize(order, container.config.currency)


@router.patch("/{order_id}/items/{item_id}")
async def update_item_quantity(
    order_id: int,
    item_id: int,
    request: QuantityUpdateRequest,
    container: Container = Depends(get_app_container),
):
    order = _order_or_404(container, order_id)
    if order.find_item(item_id) is None:
        raise HTTPException(status_code=404, detail="Order item not found.")
    container.orders.update_item_quantity(order, item_id, request.quantity)
    return serialize(order, container.config.currency)


@router.put("/{order_id}")
async def save_order(order_id: int, container: Container = Depends(get_app_container)):
    order = _order_or_404(container, order_id)
    return unwrap(await container.orders.save_order(order), container.config.currency)


@router.delete("/{order_id}")
async def delete_order(
    order_id: int,
    container: Container = Depends(get_app_container),
    confirmation: StaticConfirmationService = Depends(get_confirmation),
):
    result = await container.orders.delete_order(order_id, confirmation_service=confirmation)
    return {"deleted": unwrap(result)}
