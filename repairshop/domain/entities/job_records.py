"""
Repair record and job image domain entities.
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional
from uuid import UUID, uuid4


@dataclass
class RepairRecord:
    """Technician's note of diagnosis and work performed on a job."""

    job_id: UUID
    description: str
    created_by: UUID
    findings: Optional[str] = None
    actions: Optional[str] = None
    id: UUID = field(default_factory=uuid4)
    created_at: Optional[datetime] = None


@dataclass
class JobImage:
    """Metadata of a photo attached to a job; the bytes live in file storage."""

    job_id: UUID
    image_url: str
    image_type: str = "OTHER"
    caption: Optional[str] = None
    id: UUID = field(default_factory=uuid4)
    created_at: Optional[datetime] = None
