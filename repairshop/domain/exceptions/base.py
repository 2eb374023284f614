"""
Base domain exceptions.
"""

from typing import Any, Dict, Optional


class RepairShopError(Exception):
    """Base exception for operational errors surfaced to callers."""

    kind = "error"
    retryable = False

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def to_dict(self) -> Dict[str, Any]:
        """Machine-readable error payload."""
        return {
            "error": self.kind,
            "message": self.message,
            "retryable": self.retryable,
            "details": self.details,
        }


class InvariantViolationError(Exception):
    """Raised when persisted state breaks a domain invariant (a bug, not input)."""

    pass
