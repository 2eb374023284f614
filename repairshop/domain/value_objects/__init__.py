"""
Domain value objects package.
"""

from .activity_action import ActivityAction
from .job_number import JobNumber
from .job_priority import JobPriority
from .job_status import JobStatus
from .role import Role

__all__ = [
    "ActivityAction",
    "JobNumber",
    "JobPriority",
    "JobStatus",
    "Role",
]
