"""
Custom exceptions and error handling for the back office
"""

import logging
import traceback

logger = logging.getLogger(__name__)


class BackOfficeError(Exception):
    """Base exception for back office operations"""

    def __init__(self, message: str, user_message: str = None, error_code: str = None):
        super().__init__(message)
        self.user_message = user_message or "An error occurred. Please try again."
        self.error_code = error_code or "GENERAL_ERROR"


class ValidationError(BackOfficeError):
    """Required field missing or malformed"""

    def __init__(self, message: str, field: str = None):
        super().__init__(
            message, message, "VALIDATION_ERROR"  # Validation errors are user-friendly
        )
        self.field = field


class NotFoundError(BackOfficeError):
    """Targeted record no longer exists"""

    def __init__(self, message: str, user_message: str = None):
        super().__init__(message, user_message or message, "NOT_FOUND")


class PersistenceError(BackOfficeError):
    """Record store reported a failure"""

    def __init__(self, message: str, operation: str = None, user_message: str = None):
        super().__init__(
            message,
            user_message or "Sorry, the change could not be saved. Please try again.",
            "PERSISTENCE_ERROR",
        )
        self.operation = operation


class BusinessLogicError(BackOfficeError):
    """Business rule violations"""

    def __init__(self, message: str, user_message: str = None):
        super().__init__(message, user_message or message, "BUSINESS_ERROR")


class OperationCancelledError(BackOfficeError):
    """The operator declined a confirmation prompt"""

    def __init__(self, operation: str):
        super().__init__(f"Operation cancelled: {operation}", "Cancelled.", "CANCELLED")
        self.operation = operation


class OrderNotFoundError(NotFoundError):
    """Order not found"""

    def __init__(self, order_id: int):
        super().__init__(f"Order not found: {order_id}", f"Order #{order_id} not found.")


class CategoryNotFoundError(NotFoundError):
    """Category not found"""

    def __init__(self, category_id: int):
        super().__init__(
            f"Category not found: {category_id}", "Category not found."
        )


class MenuItemNotFoundError(NotFoundError):
    """Menu item not found"""

    def __init__(self, item_id: int):
        super().__init__(f"Menu item not found: {item_id}", "Menu item not found.")


class TableNotFoundError(NotFoundError):
    """Table not found"""

    def __init__(self, table_id: int):
        super().__init__(f"Table not found: {table_id}", "Table not found.")


class CategoryNotEmptyError(BusinessLogicError):
    """Category still holds menu items"""

    def __init__(self, category_id: int):
        super().__init__(
            f"Category {category_id} still has menu items",
            "Cannot delete category with items. Please move or delete items first.",
        )


# pylint: disable=too-few-public-methods
class ErrorReporter:
    """Error reporting and monitoring class"""

    @staticmethod
    def report_unexpected_error(error: Exception, operation: str):
        """Report errors that escaped the known taxonomy"""
        logger.critical(
            "UNEXPECTED ERROR in %s: %s",
            operation,
            error,
            extra={
                "operation": operation,
                "error_type": type(error).__name__,
                "traceback": traceback.format_exc(),
            },
        )

    @staticmethod
    def report_operation_error(error: BackOfficeError, operation: str):
        """Report known operation errors for analysis"""
        logger.info(
            "Operation error: %s - %s",
            error.error_code,
            error,
            extra={
                "error_code": error.error_code,
                "operation": operation,
                "error_type": type(error).__name__,
            },
        )
