"""
Job number sequence SQLAlchemy model.
"""

from sqlalchemy import Column, DateTime, Integer, String

from .base import Base, utcnow


class JobNumberSequenceModel(Base):
    """Per-year counter row holding the last issued job number sequence."""

    __tablename__ = "job_number_sequences"

    prefix = Column(String(16), primary_key=True)
    year = Column(Integer, primary_key=True, autoincrement=False)
    last_value = Column(Integer, nullable=False, default=0)
    updated_at = Column(DateTime(timezone=True), nullable=False, default=utcnow, onupdate=utcnow)

    def __repr__(self) -> str:
        return f"<JobNumberSequence(prefix={self.prefix}, year={self.year}, last_value={self.last_value})>"
