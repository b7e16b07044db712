"""
FastAPI dependencies
"""

from fastapi import Query, Request

from src.container import Container
from src.infrastructure.services.notification_service import StaticConfirmationService


def get_app_container(request: Request) -> Container:
    return request.app.state.container


def get_confirmation(
    confirm: bool = Query(False, description="Operator confirmed the destructive action"),
) -> StaticConfirmationService:
    """The confirm query flag answers the delete prompt"""
    return StaticConfirmationService(confirm)
