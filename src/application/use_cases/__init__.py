"""
Use Cases

Contains the business use cases of the application.
Each use case represents one operator-facing area of the back office.
"""

from .board_coordinator_use_case import BoardCoordinator
from .category_management_use_case import CategoryManagementUseCase, array_move
from .customer_directory_use_case import CustomerDirectoryUseCase
from .menu_item_management_use_case import MenuItemManagementUseCase
from .order_analytics_use_case import OrderAnalyticsUseCase
from .order_lifecycle_use_case import OrderLifecycleUseCase
from .table_layout_use_case import TableLayoutUseCase

__all__ = [
    "BoardCoordinator",
    "CategoryManagementUseCase",
    "CustomerDirectoryUseCase",
    "MenuItemManagementUseCase",
    "OrderAnalyticsUseCase",
    "OrderLifecycleUseCase",
    "TableLayoutUseCase",
    "array_move",
]
