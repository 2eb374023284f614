"""Part repository implementation."""

from decimal import Decimal
from typing import List, Optional
from uuid import UUID

from sqlalchemy import select, update
from sqlalchemy.ext.asyncio import AsyncSession

from repairshop.application.interfaces.repositories import PartRepositoryInterface
from repairshop.config.logging import get_logger
from repairshop.domain.entities.part import Part
from repairshop.domain.exceptions import NotFoundError
from repairshop.infrastructure.database.models.base import utcnow
from repairshop.infrastructure.database.models.part import PartModel

logger = get_logger(__name__)


class PartRepository(PartRepositoryInterface):
    """Part repository implementation."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def get_by_id(self, part_id: UUID) -> Optional[Part]:
        """Get part by ID, refreshing any instance already in the session."""
        stmt = (
            select(PartModel)
            .where(PartModel.id == part_id)
            .execution_options(populate_existing=True)
        )
        result = await self.db.execute(stmt)
        model = result.scalar_one_or_none()

        return self._model_to_entity(model) if model else None

    async def try_decrement_stock(self, part_id: UUID, quantity: int) -> bool:
        """
        Take ``quantity`` out of stock in one guarded statement.

        The stock check and the decrement happen in the same UPDATE, so two
        concurrent withdrawals can never both pass the check against the same
        stock level.
        """
        stmt = (
            update(PartModel)
            .where(PartModel.id == part_id, PartModel.stock_qty >= quantity)
            .values(stock_qty=PartModel.stock_qty - quantity, updated_at=utcnow())
            .execution_options(synchronize_session=False)
        )
        result = await self.db.execute(stmt)
        return result.rowcount == 1

    async def increment_stock(self, part_id: UUID, quantity: int) -> None:
        """Put ``quantity`` back into stock."""
        stmt = (
            update(PartModel)
            .where(PartModel.id == part_id)
            .values(stock_qty=PartModel.stock_qty + quantity, updated_at=utcnow())
            .execution_options(synchronize_session=False)
        )
        result = await self.db.execute(stmt)
        if result.rowcount != 1:
            raise NotFoundError("Part", part_id)

    async def find_low_stock(self, limit: int = 100) -> List[Part]:
        """Parts whose stock is at or below their minimum, scarcest first."""
        stmt = (
            select(PartModel)
            .where(PartModel.stock_qty <= PartModel.min_stock_qty)
            .order_by(PartModel.stock_qty.asc(), PartModel.part_number.asc())
            .limit(limit)
        )
        result = await self.db.execute(stmt)
        return [self._model_to_entity(model) for model in result.scalars().all()]

    def _model_to_entity(self, model: PartModel) -> Part:
        """Convert SQLAlchemy model to domain entity."""
        return Part(
            id=model.id,
            part_number=model.part_number,
            part_name=model.part_name,
            stock_qty=model.stock_qty,
            min_stock_qty=model.min_stock_qty,
            unit_price=Decimal(model.unit_price),
        )
