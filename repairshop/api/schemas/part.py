"""
Part-related API schemas.
"""

from decimal import Decimal
from uuid import UUID

from pydantic import BaseModel


class PartResponse(BaseModel):
    id: UUID
    part_number: str
    part_name: str
    stock_qty: int
    min_stock_qty: int
    unit_price: Decimal

    model_config = {"from_attributes": True}
