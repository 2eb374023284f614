"""
Activity log SQLAlchemy model.
"""

from sqlalchemy import BigInteger, Column, DateTime, ForeignKey, Index, Integer, String, Text, Uuid
from sqlalchemy.orm import relationship

from .base import Base, utcnow


class ActivityLogModel(Base):
    """Append-only audit row; ``id`` breaks ties between equal timestamps."""

    __tablename__ = "activity_logs"
    __table_args__ = (Index("ix_activity_logs_job_created", "job_id", "created_at"),)

    id = Column(
        BigInteger().with_variant(Integer, "sqlite"),
        primary_key=True,
        autoincrement=True,
    )
    job_id = Column(
        Uuid(as_uuid=True), ForeignKey("jobs.id", ondelete="CASCADE"), nullable=False
    )
    user_id = Column(Uuid(as_uuid=True), ForeignKey("users.id"), nullable=False)
    action = Column(String(50), nullable=False)
    description = Column(Text, nullable=False)
    created_at = Column(DateTime(timezone=True), nullable=False, default=utcnow)

    job = relationship("JobModel", back_populates="activity_logs")

    def __repr__(self) -> str:
        return f"<ActivityLog(id={self.id}, job_id={self.job_id}, action={self.action})>"
