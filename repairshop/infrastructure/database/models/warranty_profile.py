"""
Warranty profile SQLAlchemy model.
"""

from sqlalchemy import Column, Integer, String

from .base import BaseModel


class WarrantyProfileModel(BaseModel):
    """Warranty profile database model."""

    __tablename__ = "warranty_profiles"

    name = Column(String(255), nullable=False)
    duration_days = Column(Integer, nullable=False, default=0)
