"""Activity log repository implementation."""

from typing import List
from uuid import UUID

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from repairshop.application.interfaces.repositories import ActivityLogRepositoryInterface
from repairshop.domain.entities.activity_log import ActivityLog
from repairshop.domain.value_objects.activity_action import ActivityAction
from repairshop.infrastructure.database.models.activity_log import ActivityLogModel


class ActivityLogRepository(ActivityLogRepositoryInterface):
    """Append-only activity log repository. There is no update or delete."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def append(self, entry: ActivityLog) -> ActivityLog:
        model = ActivityLogModel(
            job_id=entry.job_id,
            user_id=entry.user_id,
            action=ActivityAction(entry.action).value,
            description=entry.description,
            created_at=entry.created_at,
        )
        self.db.add(model)
        await self.db.flush()

        return self._model_to_entity(model)

    async def list_by_job(
        self, job_id: UUID, limit: int = 50, offset: int = 0
    ) -> List[ActivityLog]:
        """Entries for a job, newest first; insertion order breaks timestamp ties."""
        stmt = (
            select(ActivityLogModel)
            .where(ActivityLogModel.job_id == job_id)
            .order_by(ActivityLogModel.created_at.desc(), ActivityLogModel.id.desc())
            .offset(offset)
            .limit(limit)
        )
        result = await self.db.execute(stmt)
        return [self._model_to_entity(model) for model in result.scalars().all()]

    async def count_by_job(self, job_id: UUID) -> int:
        stmt = (
            select(func.count())
            .select_from(ActivityLogModel)
            .where(ActivityLogModel.job_id == job_id)
        )
        return (await self.db.execute(stmt)).scalar_one()

    def _model_to_entity(self, model: ActivityLogModel) -> ActivityLog:
        return ActivityLog(
            id=model.id,
            job_id=model.job_id,
            user_id=model.user_id,
            action=ActivityAction(model.action),
            description=model.description,
            created_at=model.created_at,
        )
