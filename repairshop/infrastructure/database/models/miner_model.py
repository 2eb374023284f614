"""
Miner model SQLAlchemy model.
"""

from sqlalchemy import Column, String

from .base import BaseModel


class MinerModelModel(BaseModel):
    """ASIC miner model database model."""

    __tablename__ = "miner_models"

    brand = Column(String(100), nullable=False)
    model_name = Column(String(255), nullable=False)
