"""
Job number sequencer.

Numbers look like ``RJ2025-0001``: a prefix, the calendar year of creation
and a per-year sequence that restarts at 1 every January.
"""

from datetime import datetime

from repairshop.application.interfaces.repositories import (
    JobNumberSequenceRepositoryInterface,
    JobRepositoryInterface,
)
from repairshop.config.logging import get_logger
from repairshop.config.settings import settings
from repairshop.domain.value_objects.job_number import JobNumber

logger = get_logger(__name__)


class JobNumberSequencer:
    """
    Issues job numbers from a per-year counter row.

    ``next_job_number`` has to run inside the transaction that inserts the
    job and before any other write in it: bumping the counter is what
    serializes concurrent creators. The first number of a year seeds the
    counter from the highest number already stored, so jobs imported before
    the counter existed are never reissued. Two creators seeding the same
    year at once surface as a retryable JobNumberConflictError.
    """

    def __init__(
        self,
        sequence_repo: JobNumberSequenceRepositoryInterface,
        job_repo: JobRepositoryInterface,
        prefix: str = settings.JOB_NUMBER_PREFIX,
        width: int = settings.JOB_NUMBER_WIDTH,
    ):
        self.sequence_repo = sequence_repo
        self.job_repo = job_repo
        self.prefix = prefix
        self.width = width

    async def next_job_number(self, now: datetime) -> JobNumber:
        year = now.year

        value = await self.sequence_repo.increment(self.prefix, year)
        if value is None:
            value = await self._start_year(year)

        job_number = JobNumber(self.prefix, year, value, self.width)
        logger.debug("Job number issued", job_number=str(job_number))
        return job_number

    async def _start_year(self, year: int) -> int:
        highest = await self.job_repo.highest_job_number(
            JobNumber.year_prefix(self.prefix, year)
        )
        last = JobNumber.parse(highest, self.prefix).sequence if highest else 0
        return await self.sequence_repo.create(self.prefix, year, last + 1)
