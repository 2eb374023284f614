"""
Job-related API schemas.
"""

from datetime import datetime
from decimal import Decimal
from typing import Dict, List, Optional
from uuid import UUID

from pydantic import BaseModel, Field, field_validator

from repairshop.domain.entities.part import MAX_QUANTITY
from repairshop.domain.value_objects.activity_action import ActivityAction
from repairshop.domain.value_objects.job_priority import JobPriority
from repairshop.domain.value_objects.job_status import JobStatus

from .common import TimestampMixin


class JobCreateRequest(BaseModel):
    """Job intake request schema."""

    customer_id: UUID
    miner_model_id: UUID
    problem_description: str = Field(..., min_length=1, max_length=5000)
    priority: int = Field(0, ge=0, le=2, description="0 normal, 1 urgent, 2 critical")
    serial_number: Optional[str] = Field(None, max_length=100)
    customer_notes: Optional[str] = Field(None, max_length=5000)
    warranty_profile_id: Optional[UUID] = None
    estimated_done_date: Optional[datetime] = None

    @field_validator("problem_description")
    @classmethod
    def validate_problem_description(cls, v):
        if not v.strip():
            raise ValueError("problem_description must not be blank")
        return v.strip()


class JobUpdateRequest(BaseModel):
    """Partial job update; only fields present in the body are applied."""

    customer_id: Optional[UUID] = None
    miner_model_id: Optional[UUID] = None
    problem_description: Optional[str] = Field(None, min_length=1, max_length=5000)
    priority: Optional[int] = Field(None, ge=0, le=2)
    serial_number: Optional[str] = Field(None, max_length=100)
    customer_notes: Optional[str] = Field(None, max_length=5000)
    warranty_profile_id: Optional[UUID] = None
    estimated_done_date: Optional[datetime] = None

    model_config = {"extra": "forbid"}


class StatusChangeRequest(BaseModel):
    status: JobStatus
    note: Optional[str] = Field(None, max_length=1000)


class AssignTechnicianRequest(BaseModel):
    technician_id: UUID
    note: Optional[str] = Field(None, max_length=1000)


class RepairRecordCreateRequest(BaseModel):
    description: str = Field(..., min_length=1, max_length=5000)
    findings: Optional[str] = Field(None, max_length=5000)
    actions: Optional[str] = Field(None, max_length=5000)


class PartWithdrawRequest(BaseModel):
    """Withdrawal of stock for a job. ``unit_price`` defaults to the part's price."""

    part_id: UUID
    quantity: int = Field(..., ge=1, le=MAX_QUANTITY)
    unit_price: Optional[Decimal] = Field(None, gt=0, max_digits=12, decimal_places=2)
    notes: Optional[str] = Field(None, max_length=1000)


class ImageSchema(BaseModel):
    image_url: str = Field(..., min_length=1, max_length=500)
    caption: Optional[str] = Field(None, max_length=255)


class ImageAttachRequest(BaseModel):
    images: List[ImageSchema] = Field(..., min_length=1)
    image_type: str = Field("OTHER", max_length=30)


class JobResponse(TimestampMixin):
    """Job response schema."""

    id: UUID
    job_number: str
    status: JobStatus
    priority: JobPriority
    customer_id: UUID
    miner_model_id: UUID
    warranty_profile_id: Optional[UUID] = None
    technician_id: Optional[UUID] = None
    created_by_id: UUID
    serial_number: Optional[str] = None
    problem_description: str
    customer_notes: Optional[str] = None
    received_date: datetime
    estimated_done_date: Optional[datetime] = None
    completed_date: Optional[datetime] = None

    model_config = {"from_attributes": True}


class JobPartResponse(BaseModel):
    id: UUID
    job_id: UUID
    part_id: UUID
    part_number: Optional[str] = None
    part_name: Optional[str] = None
    quantity: int
    unit_price: Decimal
    total_price: Decimal
    notes: Optional[str] = None
    created_at: Optional[datetime] = None
    remaining_stock: Optional[int] = None


class RepairRecordResponse(BaseModel):
    id: UUID
    job_id: UUID
    description: str
    findings: Optional[str] = None
    actions: Optional[str] = None
    created_by: UUID
    created_at: Optional[datetime] = None

    model_config = {"from_attributes": True}


class JobImageResponse(BaseModel):
    id: UUID
    job_id: UUID
    image_url: str
    image_type: str
    caption: Optional[str] = None
    created_at: Optional[datetime] = None

    model_config = {"from_attributes": True}


class JobDetailResponse(JobResponse):
    """Job with its withdrawn parts, repair records and images."""

    parts: List[JobPartResponse] = Field(default_factory=list)
    repair_records: List[RepairRecordResponse] = Field(default_factory=list)
    images: List[JobImageResponse] = Field(default_factory=list)


class ActivityLogResponse(BaseModel):
    id: int
    job_id: UUID
    user_id: UUID
    action: ActivityAction
    description: str
    created_at: datetime

    model_config = {"from_attributes": True}


class JobStatisticsResponse(BaseModel):
    total: int
    active: int
    by_status: Dict[str, int]
