"""
User-facing channels the use cases talk through

Toast-style notifications and yes/no confirmation prompts. Implementations
live in the infrastructure layer.
"""

from abc import ABC, abstractmethod
from enum import Enum


class NotificationLevel(str, Enum):
    SUCCESS = "success"
    ERROR = "error"


class NotificationService(ABC):
    """Notification channel accepting (level, message)"""

    @abstractmethod
    def notify(self, level: NotificationLevel, message: str) -> None:
        """Surface a message to the operator"""

    def success(self, message: str) -> None:
        self.notify(NotificationLevel.SUCCESS, message)

    def error(self, message: str) -> None:
        self.notify(NotificationLevel.ERROR, message)


class ConfirmationService(ABC):
    """Confirmation channel for destructive operations"""

    @abstractmethod
    def confirm(self, prompt: str) -> bool:
        """Return True when the operator accepts the prompt"""
