"""
Menu management endpoints (categories and items)
"""

from typing import Optional

from fastapi import APIRouter, Depends

from src.api.dependencies import get_app_container, get_confirmation
from src.api.schemas import (
    BulkAvailabilityRequest,
    CategoryDragRequest,
    CategoryRequest,
    MenuItemRequest,
    ReorderRequest,
    serialize,
    unwrap,
)
from src.application.dtos.catalog_dtos import MenuItemDraft
from src.container import Container
from src.infrastructure.services.notification_service import StaticConfirmationService

router = APIRouter(prefix="/menu", tags=["menu"])


def _draft(request: MenuItemRequest) -> MenuItemDraft:
    return MenuItemDraft(**request.model_dump())


# Categories ----------------------------------------------------------------


@router.get("/categories")
async def list_categories(container: Container = Depends(get_app_container)):
    return serialize(container.categories.categories)


@router.post("/categories", status_code=201)
async def create_category(
    request: CategoryRequest, container: Container = Depends(get_app_container)
):
    return unwrap(await container.categories.create_category(request.name))


@router.post("/categories/reorder")
async def reorder_categories(
    request: ReorderRequest, container: Container = Depends(get_app_container)
):
    return unwrap(
        await container.categories.reorder_categories(request.old_index, request.new_index)
    )


@router.post("/categories/drag")
async def drag_category(
    request: CategoryDragRequest, container: Container = Depends(get_app_container)
):
    result = await container.categories.handle_drag_end(request.active_id, request.over_id)
    if result is None:
        return serialize(container.categories.categories)
    return unwrap(result)


@router.put("/categories/{category_id}")
async def rename_category(
    category_id: int,
    request: CategoryRequest,
    container: Container = Depends(get_app_container),
):
    return unwrap(await container.categories.rename_category(category_id, request.name))


@router.delete("/categories/{category_id}")
async def delete_category(
    category_id: int,
    container: Container = Depends(get_app_container),
    confirmation: StaticConfirmationService = Depends(get_confirmation),
):
    result = await container.categories.delete_category(
        category_id, confirmation_service=confirmation
    )
    return {"deleted": unwrap(result)}


# Items ----------------------------------------------------------------------


@router.get("/items")
async def list_items(
    category_id: Optional[int] = None,
    search: str = "",
    container: Container = Depends(get_app_container),
):
    return serialize(container.menu_items.filtered_items(category_id, search))


@router.post("/items", status_code=201)
async def create_item(
    request: MenuItemRequest, container: Container = Depends(get_app_container)
):
    return unwrap(await container.menu_items.create_item(_draft(request)))


@router.post("/items/availability")
async def bulk_update_availability(
    request: BulkAvailabilityRequest, container: Container = Depends(get_app_container)
):
    result = await container.menu_items.bulk_update_availability(
        request.item_ids, request.is_available
    )
    return unwrap(result)


@router.put("/items/{item_id}")
async def update_item(
    item_id: int,
    request: MenuItemRequest,
    container: Container = Depends(get_app_container),
):
    return unwrap(await container.menu_items.update_item(item_id, _draft(request)))


@router.post("/items/{item_id}/toggle")
async def toggle_availability(item_id: int, container: Container = Depends(get_app_container)):
    return unwrap(await container.menu_items.toggle_availability(item_id))


@router.delete("/items/{item_id}")
async def delete_item(
    item_id: int,
    container: Container = Depends(get_app_container),
    confirmation: StaticConfirmationService = Depends(get_confirmation),
):
    result = await container.menu_items.delete_item(item_id, confirmation_service=confirmation)
    return {"deleted": unwrap(result)}


@router.get("/metrics")
async def metrics(container: Container = Depends(get_app_container)):
    return container.menu_items.metrics().to_dict()


@router.post("/item-counts/reconcile")
async def reconcile_item_counts(container: Container = Depends(get_app_container)):
    return unwrap(await container.menu_items.reconcile_item_counts())
