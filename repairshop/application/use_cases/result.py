"""Operation result returned by every use case."""

from dataclasses import dataclass
from typing import Generic, Optional, TypeVar

from repairshop.domain.exceptions import RepairShopError

T = TypeVar("T")


@dataclass
class OperationResult(Generic[T]):
    """Either a value or the error that stopped the operation, never both."""

    value: Optional[T] = None
    error: Optional[RepairShopError] = None

    @classmethod
    def success(cls, value: T) -> "OperationResult[T]":
        return cls(value=value)

    @classmethod
    def failure(cls, error: RepairShopError) -> "OperationResult[T]":
        return cls(error=error)

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def error_kind(self) -> Optional[str]:
        return self.error.kind if self.error else None

    @property
    def retryable(self) -> bool:
        return bool(self.error and self.error.retryable)

    def unwrap(self) -> T:
        """Return the value or raise the error."""
        if self.error is not None:
            raise self.error
        return self.value
