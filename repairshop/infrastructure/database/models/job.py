"""
Job SQLAlchemy model.
"""

from sqlalchemy import (
    CheckConstraint,
    Column,
    DateTime,
    ForeignKey,
    Integer,
    String,
    Text,
    UniqueConstraint,
    Uuid,
)
from sqlalchemy.orm import relationship

from .base import BaseModel


class JobModel(BaseModel):
    """Repair job database model."""

    __tablename__ = "jobs"
    __table_args__ = (
        UniqueConstraint("job_number", name="uq_jobs_job_number"),
        CheckConstraint("priority BETWEEN 0 AND 2", name="ck_jobs_priority"),
    )

    job_number = Column(String(32), nullable=False)
    customer_id = Column(
        Uuid(as_uuid=True), ForeignKey("customers.id"), nullable=False, index=True
    )
    miner_model_id = Column(
        Uuid(as_uuid=True), ForeignKey("miner_models.id"), nullable=False
    )
    warranty_profile_id = Column(Uuid(as_uuid=True), ForeignKey("warranty_profiles.id"))
    technician_id = Column(Uuid(as_uuid=True), ForeignKey("users.id"), index=True)
    created_by_id = Column(Uuid(as_uuid=True), ForeignKey("users.id"), nullable=False)

    serial_number = Column(String(100))
    problem_description = Column(Text, nullable=False)
    customer_notes = Column(Text)

    status = Column(String(30), nullable=False, default="RECEIVED", index=True)
    priority = Column(Integer, nullable=False, default=0)

    received_date = Column(DateTime(timezone=True), nullable=False)
    estimated_done_date = Column(DateTime(timezone=True))
    completed_date = Column(DateTime(timezone=True))

    # Relationships
    job_parts = relationship("JobPartModel", back_populates="job", passive_deletes=True)
    activity_logs = relationship(
        "ActivityLogModel", back_populates="job", passive_deletes=True
    )

    def __repr__(self) -> str:
        return f"<Job(id={self.id}, job_number={self.job_number}, status={self.status})>"
