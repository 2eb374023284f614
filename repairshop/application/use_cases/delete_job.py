"""Delete job use case."""

from uuid import UUID

from repairshop.application.interfaces.repositories import JobRepositoryInterface
from repairshop.application.services.authorization_gate import AuthorizationGate
from repairshop.application.services.part_ledger import PartLedger
from repairshop.config.logging import get_logger
from repairshop.config.settings import settings
from repairshop.domain.entities.user import Actor
from repairshop.domain.exceptions import DeletionBlockedError, NotFoundError
from repairshop.domain.policies.permissions import Action
from repairshop.infrastructure.database.repositories.transaction_repository import (
    TransactionService,
)

from .base import UseCase
from .result import OperationResult

logger = get_logger(__name__)


class DeleteJobUseCase(UseCase):
    """
    Use case for hard-deleting a job.

    A job that owns quotations or payments is never deleted. Otherwise its
    parts ledger, activity log, repair records and images go with it. Parts
    withdrawn for the job stay consumed unless ``restore_stock`` is set.
    """

    action = Action.DELETE_JOB

    def __init__(
        self,
        gate: AuthorizationGate,
        transaction_service: TransactionService,
        job_repo: JobRepositoryInterface,
        part_ledger: PartLedger,
        restore_stock: bool = settings.RESTORE_STOCK_ON_JOB_DELETE,
    ):
        super().__init__(gate, transaction_service)
        self.job_repo = job_repo
        self.part_ledger = part_ledger
        self.restore_stock = restore_stock

    async def execute(self, actor: Actor, job_id: UUID) -> OperationResult[None]:
        async def operation() -> None:
            job = await self.job_repo.get_by_id(job_id, for_update=True)
            if job is None:
                raise NotFoundError("Job", job_id)

            blockers = {
                name: count
                for name, count in (await self.job_repo.count_billing_records(job_id)).items()
                if count
            }
            if blockers:
                raise DeletionBlockedError(f"job {job.job_number}", blockers)

            restored = 0
            if self.restore_stock:
                restored = await self.part_ledger.restore_all(job_id)
            await self.job_repo.delete(job_id)

            logger.info(
                "Job deleted",
                job_id=str(job_id),
                job_number=job.job_number,
                deleted_by=str(actor.user_id),
                units_restored=restored,
            )

        return await self.run(actor, operation)
