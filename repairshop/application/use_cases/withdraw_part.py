"""Withdraw part use case."""

from dataclasses import dataclass
from decimal import Decimal
from typing import Optional
from uuid import UUID

from repairshop.application.interfaces.repositories import JobRepositoryInterface
from repairshop.application.services.authorization_gate import AuthorizationGate
from repairshop.application.services.part_ledger import PartLedger
from repairshop.domain.entities.part import MAX_QUANTITY, JobPart
from repairshop.domain.entities.user import Actor
from repairshop.domain.exceptions import InvalidValueError, NotFoundError
from repairshop.domain.policies.permissions import Action
from repairshop.infrastructure.database.repositories.transaction_repository import (
    TransactionService,
)

from .base import UseCase
from .result import OperationResult


@dataclass
class WithdrawPartRequest:
    """Request for taking a part out of stock for a job."""

    part_id: UUID
    quantity: int
    unit_price: Optional[Decimal] = None
    notes: Optional[str] = None


class WithdrawPartUseCase(UseCase):
    """Use case for consuming inventory on a job."""

    action = Action.WITHDRAW_PART

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
        self, actor: Actor, job_id: UUID, request: WithdrawPartRequest
    ) -> OperationResult[JobPart]:
        def validate() -> None:
            if not 1 <= request.quantity <= MAX_QUANTITY:
                raise InvalidValueError("quantity", request.quantity, f"1 to {MAX_QUANTITY}")
            if request.unit_price is not None and request.unit_price <= 0:
                raise InvalidValueError(
                    "unit_price", str(request.unit_price), "a positive amount"
                )

        async def operation() -> JobPart:
            job = await self.job_repo.get_by_id(job_id)
            if job is None:
                raise NotFoundError("Job", job_id)

            return await self.part_ledger.withdraw(
                job,
                request.part_id,
                request.quantity,
                actor,
                unit_price=request.unit_price,
                notes=request.notes,
            )

        return await self.run(actor, operation, validate)
