"""
Domain exceptions package.
"""

from .authorization_error import AuthorizationError
from .base import InvariantViolationError, RepairShopError
from .conflict_error import (
    ConflictError,
    DeletionBlockedError,
    InsufficientStockError,
    JobNumberConflictError,
    NoOpTransitionError,
    TransactionConflictError,
    TransitionNotAllowedError,
)
from .not_found_error import NotFoundError
from .persistence_error import PersistenceError
from .validation_error import InvalidValueError, RequiredFieldError, ValidationError

__all__ = [
    "AuthorizationError",
    "ConflictError",
    "DeletionBlockedError",
    "InsufficientStockError",
    "InvalidValueError",
    "InvariantViolationError",
    "JobNumberConflictError",
    "NoOpTransitionError",
    "NotFoundError",
    "PersistenceError",
    "RepairShopError",
    "RequiredFieldError",
    "TransactionConflictError",
    "TransitionNotAllowedError",
    "ValidationError",
]
