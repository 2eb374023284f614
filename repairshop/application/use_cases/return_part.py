"""Return part use case."""

from uuid import UUID

from repairshop.application.interfaces.repositories import JobRepositoryInterface
from repairshop.application.services.authorization_gate import AuthorizationGate
from repairshop.application.services.part_ledger import PartLedger
from repairshop.domain.entities.part import JobPart
from repairshop.domain.entities.user import Actor
from repairshop.domain.exceptions import NotFoundError
from repairshop.domain.policies.permissions import Action
from repairshop.infrastructure.database.repositories.transaction_repository import (
    TransactionService,
)

from .base import UseCase
from .result import OperationResult


class ReturnPartUseCase(UseCase):
    """Use case for putting a withdrawn part back into stock."""

    action = Action.RETURN_PART

    def __init__(
        self,
        gate: AuthorizationGate,
        transaction_service: TransactionService,
        job_repo: JobRepositoryInterface,
        part_ledger: PartLedger,
    ):
        super().__init__(gate, transaction_service)
        self.job_repo = job_repo
        self.part_ledger = part_ledger

    async def execute(
        self, actor: Actor, job_id: UUID, job_part_id: UUID
    ) -> OperationResult[JobPart]:
        async def operation() -> JobPart:
            job = await self.job_repo.get_by_id(job_id)
            if job is None:
                raise NotFoundError("Job", job_id)
            return await self.part_ledger.return_part(job, job_part_id, actor)

        return await self.run(actor, operation)
