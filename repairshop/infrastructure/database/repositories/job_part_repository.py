"""Job part repository implementation."""

from decimal import Decimal
from typing import List, Optional
from uuid import UUID

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from repairshop.application.interfaces.repositories import JobPartRepositoryInterface
from repairshop.domain.entities.part import JobPart
from repairshop.infrastructure.database.models.base import utcnow
from repairshop.infrastructure.database.models.job_part import JobPartModel


class JobPartRepository(JobPartRepositoryInterface):
    """Consumption ledger repository."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def create(self, job_part: JobPart) -> JobPart:
        """Record a withdrawal."""
        model = JobPartModel(
            id=job_part.id,
            job_id=job_part.job_id,
            part_id=job_part.part_id,
            quantity=job_part.quantity,
            unit_price=job_part.unit_price,
            notes=job_part.notes,
            created_at=job_part.created_at or utcnow(),
        )
        self.db.add(model)
        await self.db.flush()

        return self._model_to_entity(model)

    async def get_for_job(self, job_id: UUID, job_part_id: UUID) -> Optional[JobPart]:
        stmt = select(JobPartModel).where(
            JobPartModel.id == job_part_id, JobPartModel.job_id == job_id
        )
        result = await self.db.execute(stmt)
        model = result.scalar_one_or_none()

        return self._model_to_entity(model) if model else None

    async def list_by_job(self, job_id: UUID) -> List[JobPart]:
        stmt = (
            select(JobPartModel)
            .where(JobPartModel.job_id == job_id)
            .order_by(JobPartModel.created_at.asc())
        )
        result = await self.db.execute(stmt)
        return [self._model_to_entity(model) for model in result.scalars().all()]

    async def delete(self, job_part_id: UUID) -> None:
        await self.db.execute(
            delete(JobPartModel)
            .where(JobPartModel.id == job_part_id)
            .execution_options(synchronize_session=False)
        )

    def _model_to_entity(self, model: JobPartModel) -> JobPart:
        return JobPart(
            id=model.id,
            job_id=model.job_id,
            part_id=model.part_id,
            quantity=model.quantity,
            unit_price=Decimal(model.unit_price),
            notes=model.notes,
            created_at=model.created_at,
        )
