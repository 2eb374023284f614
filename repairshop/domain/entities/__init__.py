"""
Domain entities package.
"""

from .activity_log import ActivityLog
from .job import Job
from .job_records import JobImage, RepairRecord
from .part import JobPart, Part
from .user import Actor, User

__all__ = [
    "ActivityLog",
    "Actor",
    "Job",
    "JobImage",
    "JobPart",
    "Part",
    "RepairRecord",
    "User",
]
