"""
User SQLAlchemy model.
"""

from sqlalchemy import Boolean, Column, String

from .base import BaseModel


class UserModel(BaseModel):
    """Shop staff account (managed outside the job core)."""

    __tablename__ = "users"

    username = Column(String(100), nullable=False, unique=True)
    full_name = Column(String(255))
    role = Column(String(20), nullable=False, index=True)
    is_active = Column(Boolean, nullable=False, default=True)

    def __repr__(self) -> str:
        return f"<User(id={self.id}, username={self.username}, role={self.role})>"
