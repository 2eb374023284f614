"""
Domain package.
"""

from .entities import *
from .exceptions import *
from .policies import *
from .value_objects import *

__all__ = [
    # Entities
    "ActivityLog",
    "Actor",
    "Job",
    "JobImage",
    "JobPart",
    "Part",
    "RepairRecord",
    "User",
    # Exceptions
    "AuthorizationError",
    "ConflictError",
    "NotFoundError",
    "RepairShopError",
    "ValidationError",
    # Policies
    "Action",
    "TransitionTable",
    # Value Objects
    "ActivityAction",
    "JobNumber",
    "JobPriority",
    "JobStatus",
    "Role",
]
