"""
Persistence domain exception.
"""

from .base import RepairShopError


class PersistenceError(RepairShopError):
    """Raised when the store fails for a reason the caller cannot fix."""

    kind = "persistence_error"
