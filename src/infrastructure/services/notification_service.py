"""
Notification and confirmation channel implementations
"""

import threading
from collections import deque
from dataclasses import dataclass, field
from datetime import datetime
from typing import Deque, List

from src.application.interfaces.notifications import (
    ConfirmationService,
    NotificationLevel,
    NotificationService,
)
from src.domain.entities.record_fields import utc_now
from src.infrastructure.logging.logging_config import get_structured_logger
from src.infrastructure.utilities.constants import BoardSettings


@dataclass(frozen=True)
class Notification:
    """A toast as the operator saw it"""

    level: NotificationLevel
    message: str
    created_at: datetime = field(default_factory=utc_now)

    def to_dict(self) -> dict:
        return {
            "level": self.level.value,
            "message": self.message,
            "created_at": self.created_at.isoformat(),
        }


class LoggingNotificationService(NotificationService):
    """Writes every notification to the structured log"""

    def __init__(self):
        self._logger = get_structured_logger("notifications")

    def notify(self, level: NotificationLevel, message: str) -> None:
        level = NotificationLevel(level)
        if level is NotificationLevel.ERROR:
            self._logger.warning("toast", level=level.value, message=message)
        else:
            self._logger.info("toast", level=level.value, message=message)


class InMemoryNotificationService(LoggingNotificationService):
    """Keeps the most recent notifications so a front end can poll them"""

    def __init__(self, limit: int = BoardSettings.RECENT_NOTIFICATIONS_LIMIT):
        super().__init__()
        self._recent: Deque[Notification] = deque(maxlen=limit)
        self._lock = threading.Lock()

    def notify(self, level: NotificationLevel, message: str) -> None:
        super().notify(level, message)
        with self._lock:
            self._recent.append(Notification(NotificationLevel(level), message))

    def recent(self) -> List[Notification]:
        with self._lock:
            return list(self._recent)

    def clear(self) -> None:
        with self._lock:
            self._recent.clear()


class StaticConfirmationService(ConfirmationService):
    """Answers every prompt the same way; the API builds one per request"""

    def __init__(self, answer: bool):
        self.answer = answer
        self.prompts: List[str] = []

    def confirm(self, prompt: str) -> bool:
        self.prompts.append(prompt)
        return self.answer
