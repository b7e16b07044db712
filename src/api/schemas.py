"""
Request models and response serializers for the back office API
"""

from decimal import Decimal
from typing import Any, Dict, List, Optional, Union

from fastapi import HTTPException
from pydantic import BaseModel, Field

from src.application.dtos.operation_result import OperationResult
from src.domain.entities.customer_entity import Customer
from src.domain.entities.menu_entity import Category, MenuItem
from src.domain.entities.order_entity import Order, OrderType
from src.domain.entities.table_entity import Table, TableShape
from src.domain.value_objects.elapsed_time import ElapsedTime
from src.domain.value_objects.money import Money

# Failed OperationResult error codes → HTTP status
ERROR_STATUS = {
    "VALIDATION_ERROR": 422,
    "NOT_FOUND": 404,
    "BUSINESS_ERROR": 409,
    "CANCELLED": 409,
    "PERSISTENCE_ERROR": 502,
}


# ---------------------------------------------------------------------------
# Requests
# ---------------------------------------------------------------------------


class OrderItemRequest(BaseModel):
    menu_item_id: int
    menu_item_name: str
    price: Decimal = Field(ge=0)
    quantity: int = Field(default=1, ge=1)
    special_requests: str = ""


class OrderCreateRequest(BaseModel):
    customer_name: str
    table_number: str
    items: List[OrderItemRequest] = Field(default_factory=list)
    order_type: OrderType = OrderType.DINE_IN
    special_requests: str = ""
    customer_id: Optional[int] = None


class StatusUpdateRequest(BaseModel):
    status: str


class AddItemRequest(BaseModel):
    menu_item_id: int


class QuantityUpdateRequest(BaseModel):
    quantity: int


class BoardDragRequest(BaseModel):
    active_id: int
    over_id: Optional[Union[int, str]] = None


class BoardMoveRequest(BaseModel):
    order_id: int
    direction: str = Field(pattern="^(next|previous)$")


class CategoryRequest(BaseModel):
    name: str


class ReorderRequest(BaseModel):
    old_index: int
    new_index: int


class CategoryDragRequest(BaseModel):
    active_id: int
    over_id: Optional[int] = None


class MenuItemRequest(BaseModel):
    name: str
    price: Decimal
    category_id: Optional[int] = None
    description: str = ""
    is_available: bool = True
    image_url: str = ""


class BulkAvailabilityRequest(BaseModel):
    item_ids: List[int]
    is_available: bool


class TableCreateRequest(BaseModel):
    seats: int
    shape: TableShape = TableShape.SQUARE
    x: int = 0
    y: int = 0


class TableUpdateRequest(BaseModel):
    number: Optional[int] = None
    seats: Optional[int] = None
    shape: Optional[TableShape] = None
    server: Optional[str] = None
    x: Optional[int] = None
    y: Optional[int] = None


class TableDragRequest(BaseModel):
    dx: int
    dy: int


class TableStatusRequest(BaseModel):
    status: str


# ---------------------------------------------------------------------------
# Responses
# ---------------------------------------------------------------------------


def with_id(entity) -> Dict[str, Any]:
    return {"id": entity.id, **entity.to_record()}


def order_to_dict(order: Order, currency: str = "USD") -> Dict[str, Any]:
    data = with_id(order)
    data["total_display"] = Money(order.total_amount, currency).format_display()
    return data


def elapsed_to_dict(elapsed: ElapsedTime) -> Dict[str, Any]:
    return {"minutes": elapsed.minutes, "seconds": elapsed.seconds, "display": str(elapsed)}


def serialize(value: Any, currency: str = "USD") -> Any:
    """Turn use-case return values into JSON-ready data"""
    if isinstance(value, Order):
        return order_to_dict(value, currency)
    if isinstance(value, (Category, MenuItem, Table, Customer)):
        return with_id(value)
    if isinstance(value, ElapsedTime):
        return elapsed_to_dict(value)
    if isinstance(value, (list, tuple)):
        return [serialize(item, currency) for item in value]
    if isinstance(value, dict):
        return {
            (key.value if hasattr(key, "value") else key): serialize(item, currency)
            for key, item in value.items()
        }
    if hasattr(value, "to_dict"):
        return value.to_dict()
    return value


def unwrap(result: OperationResult, currency: str = "USD") -> Any:
    """Return the data of a successful result or raise the matching HTTP error"""
    if result.success:
        return serialize(result.data, currency)
    raise HTTPException(
        status_code=ERROR_STATUS.get(result.error_code, 400),
        detail={"error_code": result.error_code, "message": result.error_message},
    )
