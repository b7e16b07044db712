"""Order Number value object"""

import re
from dataclasses import dataclass
from datetime import datetime

ORDER_NUMBER_PATTERN = re.compile(r"^ORD-\d{6}$")


@dataclass(frozen=True)
class OrderNumber:
    """Order number value object"""

    value: str

    def __post_init__(self):
        if not self.value or not self.value.strip():
            raise ValueError("Order number cannot be empty")

        # ORD- + last 6 digits of the creation timestamp
        if not ORDER_NUMBER_PATTERN.match(self.value):
            raise ValueError("Order number must follow format ORD- + 6 digits")

    @classmethod
    def from_timestamp(cls, moment: datetime) -> "OrderNumber":
        """Derive the order number from a creation time (epoch milliseconds)"""
        millis = str(int(moment.timestamp() * 1000))
        return cls(f"ORD-{millis[-6:].zfill(6)}")

    def __str__(self) -> str:
        return self.value
