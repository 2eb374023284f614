"""
Audit trail action tags.
"""

from enum import Enum


class ActivityAction(str, Enum):
    """Tag stored on every activity log row."""

    CREATE_JOB = "CREATE_JOB"
    UPDATE_JOB = "UPDATE_JOB"
    CHANGE_STATUS = "CHANGE_STATUS"
    ASSIGN_TECHNICIAN = "ASSIGN_TECHNICIAN"
    ADD_REPAIR_RECORD = "ADD_REPAIR_RECORD"
    ADD_PART = "ADD_PART"
    REMOVE_PART = "REMOVE_PART"
    UPLOAD_IMAGES = "UPLOAD_IMAGES"
    DELETE_IMAGE = "DELETE_IMAGE"
