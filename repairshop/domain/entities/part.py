"""
Part and job part domain entities.
"""

from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal
from typing import Optional
from uuid import UUID, uuid4

from repairshop.domain.exceptions import InsufficientStockError, InvalidValueError

# Stock and quantity columns are 32-bit integers
MAX_QUANTITY = 2**31 - 1


@dataclass
class Part:
    """Spare-part stock-keeping unit."""

    part_number: str
    part_name: str
    stock_qty: int = 0
    min_stock_qty: int = 0
    unit_price: Decimal = Decimal("0")
    id: UUID = field(default_factory=uuid4)

    def __post_init__(self):
        if self.stock_qty < 0:
            raise InvalidValueError("stock_qty", self.stock_qty, "a non-negative quantity")

    @property
    def is_low_stock(self) -> bool:
        return self.stock_qty <= self.min_stock_qty

    def reserve(self, quantity: int) -> None:
        """Take ``quantity`` out of stock, refusing to go below zero."""
        if quantity < 1:
            raise InvalidValueError("quantity", quantity, "at least 1")
        if self.stock_qty < quantity:
            raise InsufficientStockError(self.part_number, self.stock_qty, quantity)
        self.stock_qty -= quantity

    def restore(self, quantity: int) -> None:
        """Put ``quantity`` back into stock."""
        if quantity < 1:
            raise InvalidValueError("quantity", quantity, "at least 1")
        self.stock_qty += quantity


@dataclass
class JobPart:
    """Consumption ledger entry: stock withdrawn for a job at a price snapshot."""

    job_id: UUID
    part_id: UUID
    quantity: int
    unit_price: Decimal
    notes: Optional[str] = None
    id: UUID = field(default_factory=uuid4)
    created_at: Optional[datetime] = None
    part: Optional[Part] = None

    @property
    def total_price(self) -> Decimal:
        return Decimal(self.unit_price) * self.quantity
