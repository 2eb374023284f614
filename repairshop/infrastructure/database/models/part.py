"""
Part SQLAlchemy model.
"""

from sqlalchemy import CheckConstraint, Column, Integer, Numeric, String

from .base import BaseModel


class PartModel(BaseModel):
    """Spare part database model."""

    __tablename__ = "parts"
    __table_args__ = (
        CheckConstraint("stock_qty >= 0", name="ck_parts_stock_qty_non_negative"),
    )

    part_number = Column(String(50), nullable=False, unique=True)
    part_name = Column(String(255), nullable=False)
    stock_qty = Column(Integer, nullable=False, default=0)
    min_stock_qty = Column(Integer, nullable=False, default=0)
    unit_price = Column(Numeric(12, 2), nullable=False, default=0)

    def __repr__(self) -> str:
        return f"<Part(id={self.id}, part_number={self.part_number}, stock_qty={self.stock_qty})>"
