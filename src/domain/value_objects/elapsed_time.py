"""Elapsed time value object shown on order cards"""

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class ElapsedTime:
    """Whole minutes and seconds since an order last changed"""

    minutes: int
    seconds: int

    def __post_init__(self):
        if self.minutes < 0 or not 0 <= self.seconds < 60:
            raise ValueError("Elapsed time must be non-negative with seconds below 60")

    @classmethod
    def between(cls, origin: datetime, now: datetime) -> "ElapsedTime":
        """Elapsed time from origin to now, clamped at zero"""
        total = max(0, int((now - origin).total_seconds()))
        return cls(minutes=total // 60, seconds=total % 60)

    @property
    def total_seconds(self) -> int:
        return self.minutes * 60 + self.seconds

    def __str__(self) -> str:
        return f"{self.minutes}:{self.seconds:02d}"
