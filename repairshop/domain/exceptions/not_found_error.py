"""
Not-found domain exception.
"""

from typing import Any

from .base import RepairShopError


class NotFoundError(RepairShopError):
    """Raised when a referenced job, part, user or record does not exist."""

    kind = "not_found"

    def __init__(self, resource: str, identifier: Any):
        self.resource = resource
        self.identifier = identifier
        super().__init__(
            f"{resource} {identifier} not found",
            {"resource": resource, "id": str(identifier)},
        )
