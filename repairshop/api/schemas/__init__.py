"""
API schemas for the repair-shop job service.
"""

from .common import ErrorResponse, PaginatedResponse
from .job import (
    ActivityLogResponse,
    JobCreateRequest,
    JobDetailResponse,
    JobResponse,
    JobUpdateRequest,
)
from .part import PartResponse

__all__ = [
    "ActivityLogResponse",
    "ErrorResponse",
    "JobCreateRequest",
    "JobDetailResponse",
    "JobResponse",
    "JobUpdateRequest",
    "PaginatedResponse",
    "PartResponse",
]
