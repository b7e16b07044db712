"""
Result returned by every use-case operation
"""

from dataclasses import dataclass
from typing import Any, Generic, Optional, TypeVar

T = TypeVar("T")


@dataclass
class OperationResult(Generic[T]):
    """Outcome of an operator action; failures carry the error code"""

    success: bool
    data: Optional[T] = None
    error_code: Optional[str] = None
    error_message: Optional[str] = None

    @classmethod
    def ok(cls, data: Any = None) -> "OperationResult":
        return cls(success=True, data=data)

    @classmethod
    def failed(cls, error_code: str, error_message: str) -> "OperationResult":
        return cls(success=False, error_code=error_code, error_message=error_message)

    @property
    def cancelled(self) -> bool:
        return self.error_code == "CANCELLED"
