"""Add repair record use case."""

from dataclasses import dataclass
from typing import Optional
from uuid import UUID

from repairshop.application.interfaces.repositories import (
    JobRecordRepositoryInterface,
    JobRepositoryInterface,
)
from repairshop.application.services.audit_trail import AuditTrail
from repairshop.application.services.authorization_gate import AuthorizationGate
from repairshop.application.services.clock import Clock, utc_now
from repairshop.domain.entities.job_records import RepairRecord
from repairshop.domain.entities.user import Actor
from repairshop.domain.exceptions import NotFoundError, RequiredFieldError
from repairshop.domain.policies.permissions import Action
from repairshop.domain.value_objects.activity_action import ActivityAction
from repairshop.infrastructure.database.repositories.transaction_repository import (
    TransactionService,
)

from .base import UseCase
from .result import OperationResult

SUMMARY_LENGTH = 50


@dataclass
class AddRepairRecordRequest:
    description: str
    findings: Optional[str] = None
    actions: Optional[str] = None


def summarize(text: str, length: int = SUMMARY_LENGTH) -> str:
    text = text.strip()
    return text if len(text) <= length else f"{text[:length]}..."


class AddRepairRecordUseCase(UseCase):
    """Use case for noting diagnosis and work done on a job."""

    action = Action.ADD_REPAIR_RECORD

    def __init__(
        self,
        gate: AuthorizationGate,
        transaction_service: TransactionService,
        job_repo: JobRepositoryInterface,
        record_repo: JobRecordRepositoryInterface,
        audit_trail: AuditTrail,
        clock: Optional[Clock] = None,
    ):
        super().__init__(gate, transaction_service)
        self.job_repo = job_repo
        self.record_repo = record_repo
        self.audit_trail = audit_trail
        self.clock = clock or utc_now

    async def execute(
        self, actor: Actor, job_id: UUID, request: AddRepairRecordRequest
    ) -> OperationResult[RepairRecord]:
        def validate() -> None:
            if not request.description or not request.description.strip():
                raise RequiredFieldError("description")

        async def operation() -> RepairRecord:
            job = await self.job_repo.get_by_id(job_id)
            if job is None:
                raise NotFoundError("Job", job_id)

            record = await self.record_repo.add_repair_record(
                RepairRecord(
                    job_id=job.id,
                    description=request.description.strip(),
                    findings=request.findings,
                    actions=request.actions,
                    created_by=actor.user_id,
                    created_at=self.clock(),
                )
            )
            await self.audit_trail.record(
                job.id,
                actor.user_id,
                ActivityAction.ADD_REPAIR_RECORD,
                f"Added repair record: {summarize(record.description)}",
            )
            return record

        return await self.run(actor, operation, validate)
