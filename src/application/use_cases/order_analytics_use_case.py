"""
Order Analytics Use Case

Dashboard figures and daily summaries computed from the in-process order and
menu collections.
"""

import logging
from collections import Counter, defaultdict
from datetime import date, timedelta
from decimal import Decimal
from typing import Any, Dict, List, Optional

from src.application.derived_views import order_stats
from src.application.use_cases.menu_item_management_use_case import (
    MenuItemManagementUseCase,
)
from src.application.use_cases.order_lifecycle_use_case import OrderLifecycleUseCase


class OrderAnalyticsUseCase:
    """Use case for the dashboard and analytics pages"""

    def __init__(
        self,
        order_lifecycle: OrderLifecycleUseCase,
        menu_items: MenuItemManagementUseCase,
    ):
        self._orders = order_lifecycle
        self._menu_items = menu_items
        self._logger = logging.getLogger(self.__class__.__name__)

    def _today(self) -> date:
        return self._orders.now().date()

    def dashboard(self, today: Optional[date] = None) -> Dict[str, Any]:
        """Menu metrics plus today's revenue"""
        today = today or self._today()
        metrics = self._menu_items.metrics().to_dict()
        metrics["today_revenue"] = float(order_stats(self._orders.orders, today).today_revenue)
        return metrics

    def get_daily_summary(self, day: Optional[date] = None) -> Dict[str, Any]:
        """Orders, revenue and breakdowns for one calendar day"""
        day = day or self._today()
        self._logger.info("📊 GENERATING DAILY SUMMARY: %s", day.isoformat())

        day_orders = [
            order
            for order in self._orders.orders
            if order.created_at and order.created_at.date() == day
        ]
        total_orders = len(day_orders)
        total_revenue = sum((order.total_amount for order in day_orders), Decimal("0"))
        average = total_revenue / total_orders if total_orders else Decimal("0")

        summary = {
            "date": day.isoformat(),
            "total_orders": total_orders,
            "total_revenue": float(total_revenue),
            "average_order_value": float(round(average, 2)),
            "status_breakdown": dict(Counter(order.status.value for order in day_orders)),
            "order_type_breakdown": dict(Counter(order.order_type.value for order in day_orders)),
        }

        self._logger.info(
            "📈 DAILY SUMMARY: %d orders, %.2f revenue", total_orders, total_revenue
        )
        return summary

    def get_weekly_trends(self, today: Optional[date] = None) -> Dict[str, Any]:
        """Per-day orders and revenue over the last seven days"""
        today = today or self._today()
        week_data = {}
        for offset in range(7):
            day = today - timedelta(days=offset)
            summary = self.get_daily_summary(day)
            week_data[summary["date"]] = {
                "orders": summary["total_orders"],
                "revenue": summary["total_revenue"],
                "day_name": day.strftime("%A"),
            }

        total_orders = sum(data["orders"] for data in week_data.values())
        total_revenue = sum(data["revenue"] for data in week_data.values())
        return {
            "week_data": week_data,
            "total_weekly_orders": total_orders,
            "total_weekly_revenue": round(total_revenue, 2),
            "daily_average_orders": total_orders / 7,
            "daily_average_revenue": round(total_revenue / 7, 2),
        }

    def get_popular_items(self, limit: int = 10) -> List[Dict[str, Any]]:
        """Menu items ranked by how many orders include them"""
        stats = defaultdict(lambda: {"count": 0, "total_quantity": 0, "revenue": Decimal("0")})

        for order in self._orders.orders:
            for item in order.items:
                entry = stats[item.menu_item_name]
                entry["count"] += 1
                entry["total_quantity"] += item.quantity
                entry["revenue"] += item.line_total.amount

        popular = sorted(
            (
                {
                    "menu_item_name": name,
                    "order_count": entry["count"],
                    "total_quantity": entry["total_quantity"],
                    "total_revenue": float(entry["revenue"]),
                }
                for name, entry in stats.items()
            ),
            key=lambda row: (-row["order_count"], row["menu_item_name"]),
        )[:limit]

        self._logger.info("📈 TOP ITEMS: %d items analyzed", len(popular))
        return popular
