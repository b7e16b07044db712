"""
Application interfaces

Ports the use cases need from the outside world besides persistence.
"""

from .notifications import ConfirmationService, NotificationLevel, NotificationService

__all__ = [
    "ConfirmationService",
    "NotificationLevel",
    "NotificationService",
]
