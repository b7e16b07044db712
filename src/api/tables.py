"""
Floor plan endpoints
"""

from fastapi import APIRouter, Depends

from src.api.dependencies import get_app_container, get_confirmation
from src.api.schemas import (
    TableCreateRequest,
    TableDragRequest,
    TableStatusRequest,
    TableUpdateRequest,
    serialize,
    unwrap,
)
from src.application.dtos.catalog_dtos import TableDraft
from src.container import Container
from src.infrastructure.services.notification_service import StaticConfirmationService

router = APIRouter(prefix="/tables", tags=["tables"])


@router.get("")
async def list_tables(container: Container = Depends(get_app_container)):
    return serialize(container.tables.tables)


@router.post("", status_code=201)
async def create_table(
    request: TableCreateRequest, container: Container = Depends(get_app_container)
):
    return unwrap(await container.tables.create_table(TableDraft(**request.model_dump())))


@router.get("/stats")
async def stats(container: Container = Depends(get_app_container)):
    return container.tables.stats().to_dict()


@router.get("/templates")
async def templates(container: Container = Depends(get_app_container)):
    return serialize(container.tables.floor_plan_templates())


@router.put("/{table_id}")
async def update_table(
    table_id: int,
    request: TableUpdateRequest,
    container: Container = Depends(get_app_container),
):
    fields = request.model_dump(exclude_unset=True)
    if "shape" in fields and fields["shape"] is not None:
        fields["shape"] = fields["shape"].value
    return unwrap(await container.tables.update_table(table_id, **fields))


@router.post("/{table_id}/drag")
async def drag_table(
    table_id: int, request: TableDragRequest, container: Container = Depends(get_app_container)
):
    return unwrap(await container.tables.drag_table(table_id, request.dx, request.dy))


@router.patch("/{table_id}/status")
async def update_status(
    table_id: int,
    request: TableStatusRequest,
    container: Container = Depends(get_app_container),
):
    return unwrap(await container.tables.set_table_status(table_id, request.status))


@router.delete("/{table_id}")
async def delete_table(
    table_id: int,
    container: Container = Depends(get_app_container),
    confirmation: StaticConfirmationService = Depends(get_confirmation),
):
    result = await container.tables.delete_table(table_id, confirmation_service=confirmation)
    return {"deleted": unwrap(result)}
