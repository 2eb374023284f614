"""
Audit trail service for job activity.
"""

from typing import List, Optional
from uuid import UUID

from repairshop.application.interfaces.repositories import ActivityLogRepositoryInterface
from repairshop.application.services.clock import Clock, utc_now
from repairshop.config.logging import get_logger
from repairshop.domain.entities.activity_log import ActivityLog
from repairshop.domain.value_objects.activity_action import ActivityAction

logger = get_logger(__name__)


class AuditTrail:
    """
    Writes and reads the append-only activity log of a job.

    ``record`` must be called inside the transaction of the mutation it
    describes, so a rolled-back mutation never leaves an entry behind.
    """

    def __init__(
        self, activity_repo: ActivityLogRepositoryInterface, clock: Optional[Clock] = None
    ):
        self.activity_repo = activity_repo
        self.clock = clock or utc_now

    async def record(
        self, job_id: UUID, user_id: UUID, action: ActivityAction, description: str
    ) -> ActivityLog:
        entry = await self.activity_repo.append(
            ActivityLog(
                job_id=job_id,
                user_id=user_id,
                action=ActivityAction(action),
                description=description,
                created_at=self.clock(),
            )
        )
        logger.debug(
            "Activity recorded",
            job_id=str(job_id),
            user_id=str(user_id),
            action=entry.action.value,
        )
        return entry

    async def list_for_job(
        self, job_id: UUID, limit: int = 50, offset: int = 0
    ) -> List[ActivityLog]:
        """Entries for a job, most recent first."""
        return await self.activity_repo.list_by_job(job_id, limit=limit, offset=offset)

    async def count_for_job(self, job_id: UUID) -> int:
        return await self.activity_repo.count_by_job(job_id)
