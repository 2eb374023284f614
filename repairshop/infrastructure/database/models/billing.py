"""
Quotation and payment SQLAlchemy models.

The job core never writes these tables; their rows only block job deletion.
"""

from sqlalchemy import Column, ForeignKey, Numeric, String, Uuid

from .base import BaseModel


class QuotationModel(BaseModel):
    """Quotation issued against a job."""

    __tablename__ = "quotations"

    job_id = Column(Uuid(as_uuid=True), ForeignKey("jobs.id"), nullable=False, index=True)
    total_amount = Column(Numeric(12, 2), nullable=False, default=0)
    status = Column(String(20), nullable=False, default="DRAFT")


class PaymentModel(BaseModel):
    """Payment received for a job."""

    __tablename__ = "payments"

    job_id = Column(Uuid(as_uuid=True), ForeignKey("jobs.id"), nullable=False, index=True)
    amount = Column(Numeric(12, 2), nullable=False)
    method = Column(String(20))
