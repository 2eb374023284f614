"""Job number sequence repository implementation."""

from typing import Optional

from sqlalchemy import select, update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from repairshop.application.interfaces.repositories import (
    JobNumberSequenceRepositoryInterface,
)
from repairshop.config.logging import get_logger
from repairshop.domain.exceptions import JobNumberConflictError
from repairshop.infrastructure.database.models.base import utcnow
from repairshop.infrastructure.database.models.job_number_sequence import (
    JobNumberSequenceModel,
)

logger = get_logger(__name__)


class JobNumberSequenceRepository(JobNumberSequenceRepositoryInterface):
    """Counter rows keyed by (prefix, year)."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def increment(self, prefix: str, year: int) -> Optional[int]:
        """
        Bump the counter for ``year`` and return the new value.

        The UPDATE takes the row lock (a write lock on SQLite) before anything
        else in the transaction, so concurrent creators queue here and each
        reads back its own value.
        """
        stmt = (
            update(JobNumberSequenceModel)
            .where(
                JobNumberSequenceModel.prefix == prefix,
                JobNumberSequenceModel.year == year,
            )
            .values(
                last_value=JobNumberSequenceModel.last_value + 1, updated_at=utcnow()
            )
            .execution_options(synchronize_session=False)
        )
        result = await self.db.execute(stmt)
        if result.rowcount == 0:
            return None

        value = await self.db.execute(
            select(JobNumberSequenceModel.last_value).where(
                JobNumberSequenceModel.prefix == prefix,
                JobNumberSequenceModel.year == year,
            )
        )
        return value.scalar_one()

    async def create(self, prefix: str, year: int, last_value: int) -> int:
        """Start the counter for a new year at ``last_value``."""
        self.db.add(
            JobNumberSequenceModel(
                prefix=prefix, year=year, last_value=last_value, updated_at=utcnow()
            )
        )
        try:
            await self.db.flush()
        except IntegrityError as e:
            logger.warning("Job number counter created concurrently", year=year)
            raise JobNumberConflictError() from e

        logger.info("Job number counter started", prefix=prefix, year=year, last_value=last_value)
        return last_value
