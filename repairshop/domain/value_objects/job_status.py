"""
Job status value object.
"""

from enum import Enum


class JobStatus(str, Enum):
    """Repair job status enumeration."""

    RECEIVED = "RECEIVED"
    DIAGNOSED = "DIAGNOSED"
    WAITING_APPROVAL = "WAITING_APPROVAL"
    IN_REPAIR = "IN_REPAIR"
    WAITING_PARTS = "WAITING_PARTS"
    TESTING = "TESTING"
    READY_FOR_PICKUP = "READY_FOR_PICKUP"
    COMPLETED = "COMPLETED"
    CANCELLED = "CANCELLED"
    ON_HOLD = "ON_HOLD"

    def is_closed(self) -> bool:
        """Check if the job no longer counts as active work."""
        return self in [self.COMPLETED, self.CANCELLED]
