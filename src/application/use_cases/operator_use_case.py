"""
Shared plumbing for operator-facing use cases

Every operation is an error boundary: known errors are logged, reported
and turned into a single notification plus a failed OperationResult.
"""

import logging
from datetime import datetime
from typing import Callable, Optional

from src.application.dtos.operation_result import OperationResult
from src.application.interfaces.notifications import (
    ConfirmationService,
    NotificationService,
)
from src.domain.entities.record_fields import utc_now
from src.infrastructure.utilities.exceptions import (
    BackOfficeError,
    ErrorReporter,
    OperationCancelledError,
    ValidationError,
)

Clock = Callable[[], datetime]


class OperatorUseCase:
    """Base class holding the notification/confirmation channels"""

    def __init__(
        self,
        notification_service: NotificationService,
        confirmation_service: Optional[ConfirmationService] = None,
        clock: Clock = utc_now,
    ):
        self._notification_service = notification_service
        self._confirmation_service = confirmation_service
        self._clock = clock
        self._logger = logging.getLogger(self.__class__.__name__)

    def now(self) -> datetime:
        return self._clock()

    def _succeed(self, message: Optional[str], data=None) -> OperationResult:
        if message:
            self._notification_service.success(message)
        return OperationResult.ok(data)

    def _fail(self, operation: str, error: Exception) -> OperationResult:
        """Convert an error into one notification and a failed result"""
        if isinstance(error, (ValueError, TypeError)) and not isinstance(error, BackOfficeError):
            error = ValidationError(str(error))

        if isinstance(error, BackOfficeError):
            self._logger.error("💥 %s FAILED: %s", operation.upper(), error)
            ErrorReporter.report_operation_error(error, operation)
            self._notification_service.error(error.user_message)
            return OperationResult.failed(error.error_code, error.user_message)

        # Anything else is a programming error; keep it visible
        ErrorReporter.report_unexpected_error(error, operation)
        raise error

    def _confirm(
        self, prompt: str, confirmation_service: Optional[ConfirmationService] = None
    ) -> bool:
        """Ask before destructive operations; no channel means no consent"""
        channel = confirmation_service or self._confirmation_service
        if channel is None:
            self._logger.warning("⚠️ NO CONFIRMATION CHANNEL for: %s", prompt)
            return False
        return channel.confirm(prompt)

    def _cancelled(self, operation: str) -> OperationResult:
        """A declined confirmation: no persistence, no notification"""
        error = OperationCancelledError(operation)
        self._logger.info("🚫 %s", error)
        return OperationResult.failed(error.error_code, error.user_message)
