"""
Activity log domain entity.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Optional
from uuid import UUID

from repairshop.domain.value_objects.activity_action import ActivityAction


@dataclass(frozen=True)
class ActivityLog:
    """Append-only audit entry attached to a job."""

    job_id: UUID
    user_id: UUID
    action: ActivityAction
    description: str
    created_at: datetime
    id: Optional[int] = None
