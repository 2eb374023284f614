"""
Repair record and job image SQLAlchemy models.
"""

from sqlalchemy import Column, ForeignKey, String, Text, Uuid

from .base import BaseModel


class RepairRecordModel(BaseModel):
    """Repair record database model."""

    __tablename__ = "repair_records"

    job_id = Column(
        Uuid(as_uuid=True),
        ForeignKey("jobs.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    description = Column(Text, nullable=False)
    findings = Column(Text)
    actions = Column(Text)
    created_by = Column(Uuid(as_uuid=True), ForeignKey("users.id"), nullable=False)


class JobImageModel(BaseModel):
    """Job image metadata database model."""

    __tablename__ = "job_images"

    job_id = Column(
        Uuid(as_uuid=True),
        ForeignKey("jobs.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    image_url = Column(String(500), nullable=False)
    image_type = Column(String(30), nullable=False, default="OTHER")
    caption = Column(String(255))
