"""
Customers, analytics, notifications and health endpoints
"""

from datetime import date
from typing import Optional

from fastapi import APIRouter, Depends

from src.api.dependencies import get_app_container
from src.api.schemas import serialize, unwrap
from src.config import ConfigValidator
from src.container import Container

router = APIRouter()


@router.get("/health", tags=["health"])
async def health_check(container: Container = Depends(get_app_container)):
    """Health check endpoint"""
    validator = ConfigValidator(container.config)
    validator.validate_all()
    report = validator.get_validation_report()
    return {
        "status": "ok" if report["valid"] else "degraded",
        "environment": container.config.environment,
        "record_store_backend": container.config.record_store_backend,
        "orders": len(container.orders.orders),
        "config_errors": report["errors"],
    }


@router.get("/customers", tags=["customers"])
async def list_customers(search: str = "", container: Container = Depends(get_app_container)):
    return unwrap(await container.customers.list_customers(search))


@router.get("/customers/{customer_id}", tags=["customers"])
async def get_customer(customer_id: int, container: Container = Depends(get_app_container)):
    return unwrap(await container.customers.get_customer(customer_id))


@router.get("/analytics/dashboard", tags=["analytics"])
async def dashboard(container: Container = Depends(get_app_container)):
    return container.analytics.dashboard()


@router.get("/analytics/daily", tags=["analytics"])
async def daily_summary(
    day: Optional[date] = None, container: Container = Depends(get_app_container)
):
    return container.analytics.get_daily_summary(day)


@router.get("/analytics/weekly", tags=["analytics"])
async def weekly_trends(container: Container = Depends(get_app_container)):
    return container.analytics.get_weekly_trends()


@router.get("/analytics/popular-items", tags=["analytics"])
async def popular_items(limit: int = 10, container: Container = Depends(get_app_container)):
    return container.analytics.get_popular_items(limit)


@router.get("/notifications", tags=["notifications"])
async def notifications(container: Container = Depends(get_app_container)):
    return serialize(container.notifications.recent())


@router.delete("/notifications", tags=["notifications"])
async def clear_notifications(container: Container = Depends(get_app_container)):
    container.notifications.clear()
    return {"cleared": True}
