"""
Domain policies package.
"""

from .permissions import ANY_ROLE, DEFAULT_CAPABILITIES, Action
from .status_transitions import (
    DEFAULT_TRANSITIONS,
    TransitionTable,
    permissive_transitions,
)

__all__ = [
    "ANY_ROLE",
    "Action",
    "DEFAULT_CAPABILITIES",
    "DEFAULT_TRANSITIONS",
    "TransitionTable",
    "permissive_transitions",
]
