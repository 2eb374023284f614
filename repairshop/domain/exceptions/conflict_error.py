"""
Conflict-related domain exceptions.
"""

from typing import Any, Dict, Optional

from .base import RepairShopError


class ConflictError(RepairShopError):
    """Raised when the request clashes with the current state of the data."""

    kind = "conflict"

    def __init__(
        self, message: str, cause: str, details: Optional[Dict[str, Any]] = None
    ):
        self.cause = cause
        super().__init__(message, {"cause": cause, **(details or {})})


class InsufficientStockError(ConflictError):
    """Raised when a withdrawal asks for more than the part has on hand."""

    def __init__(self, part_number: str, available: int, requested: int):
        self.part_number = part_number
        self.available = available
        self.requested = requested
        super().__init__(
            f"Insufficient stock for part {part_number}: "
            f"only {available} in stock, {requested} requested",
            cause="insufficient_stock",
            details={"available": available, "requested": requested},
        )


class NoOpTransitionError(ConflictError):
    """Raised when a status change targets the job's current status."""

    def __init__(self, status: str):
        self.status = status
        super().__init__(
            f"Job already at that status ({status})",
            cause="no_op_transition",
            details={"status": status},
        )


class TransitionNotAllowedError(ConflictError):
    """Raised when the transition table forbids moving between two statuses."""

    def __init__(self, current_status: str, requested_status: str):
        self.current_status = current_status
        self.requested_status = requested_status
        super().__init__(
            f"Cannot move job from {current_status} to {requested_status}",
            cause="transition_not_allowed",
            details={"from": current_status, "to": requested_status},
        )


class DeletionBlockedError(ConflictError):
    """Raised when dependent records prevent a hard delete."""

    def __init__(self, resource: str, blockers: Dict[str, int]):
        self.resource = resource
        self.blockers = blockers
        summary = ", ".join(f"{count} {name}" for name, count in blockers.items())
        super().__init__(
            f"Cannot delete {resource}: it still has {summary}",
            cause="deletion_blocked",
            details={"blockers": blockers},
        )


class JobNumberConflictError(ConflictError):
    """Raised when a concurrently issued job number collided; safe to retry."""

    retryable = True

    def __init__(self, job_number: Optional[str] = None):
        self.job_number = job_number
        subject = f"Job number {job_number}" if job_number else "Job number"
        super().__init__(
            f"{subject} was taken by a concurrent request",
            cause="job_number_collision",
            details={"job_number": job_number},
        )


class TransactionConflictError(ConflictError):
    """Raised when the store aborted the transaction (lock timeout, serialization)."""

    retryable = True

    def __init__(self, message: str = "Concurrent update conflict, please retry"):
        super().__init__(message, cause="concurrent_update")
