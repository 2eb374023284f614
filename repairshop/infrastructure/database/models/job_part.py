"""
Job part SQLAlchemy model.
"""

from sqlalchemy import CheckConstraint, Column, ForeignKey, Integer, Numeric, Text, Uuid
from sqlalchemy.orm import relationship

from .base import BaseModel


class JobPartModel(BaseModel):
    """Consumption ledger row: quantity of a part withdrawn for a job."""

    __tablename__ = "job_parts"
    __table_args__ = (CheckConstraint("quantity >= 1", name="ck_job_parts_quantity"),)

    job_id = Column(
        Uuid(as_uuid=True),
        ForeignKey("jobs.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    part_id = Column(
        Uuid(as_uuid=True),
        ForeignKey("parts.id", ondelete="RESTRICT"),
        nullable=False,
        index=True,
    )
    quantity = Column(Integer, nullable=False)
    unit_price = Column(Numeric(12, 2), nullable=False)
    notes = Column(Text)

    # Relationships
    job = relationship("JobModel", back_populates="job_parts")
    part = relationship("PartModel")
