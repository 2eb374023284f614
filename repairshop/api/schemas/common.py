"""
Common API schemas.
"""

from datetime import datetime
from typing import Any, Dict

from pydantic import BaseModel, Field


class ErrorResponse(BaseModel):
    """Error body returned for every failed operation."""

    error: str = Field(..., description="Machine-readable error kind")
    message: str
    retryable: bool = False
    details: Dict[str, Any] = Field(default_factory=dict)


class PaginatedResponse(BaseModel):
    """Offset-paginated list."""

    items: list
    total: int
    limit: int
    offset: int
    has_next: bool


class TimestampMixin(BaseModel):
    """Mixin for timestamp fields."""

    created_at: datetime
    updated_at: datetime
