"""
Customer SQLAlchemy model.
"""

from sqlalchemy import Column, String

from .base import BaseModel


class CustomerModel(BaseModel):
    """Customer database model."""

    __tablename__ = "customers"

    full_name = Column(String(255), nullable=False)
    phone = Column(String(20))
    email = Column(String(255))
