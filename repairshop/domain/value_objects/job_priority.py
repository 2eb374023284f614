"""
Job priority value object.
"""

from enum import IntEnum


class JobPriority(IntEnum):
    """Repair job priority (0 normal, 1 urgent, 2 critical)."""

    NORMAL = 0
    URGENT = 1
    CRITICAL = 2
