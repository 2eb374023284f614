"""Create job use case."""

from dataclasses import dataclass
from datetime import datetime
from typing import Optional
from uuid import UUID

from repairshop.application.interfaces.repositories import (
    DirectoryRepositoryInterface,
    JobRepositoryInterface,
)
from repairshop.application.services.audit_trail import AuditTrail
from repairshop.application.services.authorization_gate import AuthorizationGate
from repairshop.application.services.clock import Clock, utc_now
from repairshop.application.services.job_number_sequencer import JobNumberSequencer
from repairshop.config.logging import get_logger
from repairshop.domain.entities.job import Job
from repairshop.domain.entities.user import Actor
from repairshop.domain.exceptions import ValidationError
from repairshop.domain.policies.permissions import Action
from repairshop.domain.value_objects.activity_action import ActivityAction
from repairshop.infrastructure.database.repositories.transaction_repository import (
    TransactionService,
)
from repairshop.infrastructure.monitoring.metrics import record_job_creation

from .base import UseCase
from .result import OperationResult

logger = get_logger(__name__)


@dataclass
class CreateJobRequest:
    """Request for creating a job."""

    customer_id: UUID
    miner_model_id: UUID
    problem_description: str
    priority: int = 0
    serial_number: Optional[str] = None
    customer_notes: Optional[str] = None
    warranty_profile_id: Optional[UUID] = None
    estimated_done_date: Optional[datetime] = None


async def check_job_references(
    directory_repo: DirectoryRepositoryInterface,
    customer_id: Optional[UUID] = None,
    miner_model_id: Optional[UUID] = None,
    warranty_profile_id: Optional[UUID] = None,
) -> None:
    """Raise ValidationError for any given reference that does not exist."""
    if customer_id and not await directory_repo.customer_exists(customer_id):
        raise ValidationError(
            f"Customer {customer_id} not found", {"customer_id": str(customer_id)}
        )
    if miner_model_id and not await directory_repo.miner_model_exists(miner_model_id):
        raise ValidationError(
            f"Miner model {miner_model_id} not found",
            {"miner_model_id": str(miner_model_id)},
        )
    if warranty_profile_id and not await directory_repo.warranty_profile_exists(
        warranty_profile_id
    ):
        raise ValidationError(
            f"Warranty profile {warranty_profile_id} not found",
            {"warranty_profile_id": str(warranty_profile_id)},
        )


class CreateJobUseCase(UseCase):
    """Use case for registering a new repair job at intake."""

    action = Action.CREATE_JOB

    def __init__(
        self,
        gate: AuthorizationGate,
        transaction_service: TransactionService,
        job_repo: JobRepositoryInterface,
        directory_repo: DirectoryRepositoryInterface,
        sequencer: JobNumberSequencer,
        audit_trail: AuditTrail,
        clock: Optional[Clock] = None,
    ):
        super().__init__(gate, transaction_service)
        self.job_repo = job_repo
        self.directory_repo = directory_repo
        self.sequencer = sequencer
        self.audit_trail = audit_trail
        self.clock = clock or utc_now

    async def execute(
        self, actor: Actor, request: CreateJobRequest
    ) -> OperationResult[Job]:
        """Create a job with a fresh job number and a CREATE_JOB activity entry."""
        job: Optional[Job] = None

        def validate() -> None:
            nonlocal job
            job = Job(
                customer_id=request.customer_id,
                miner_model_id=request.miner_model_id,
                problem_description=request.problem_description,
                created_by_id=actor.user_id,
                priority=request.priority,
                serial_number=request.serial_number,
                customer_notes=request.customer_notes,
                warranty_profile_id=request.warranty_profile_id,
                estimated_done_date=request.estimated_done_date,
            )

        async def operation() -> Job:
            await check_job_references(
                self.directory_repo,
                customer_id=request.customer_id,
                miner_model_id=request.miner_model_id,
                warranty_profile_id=request.warranty_profile_id,
            )

            now = self.clock()
            # The counter bump is the first write of the transaction
            job_number = await self.sequencer.next_job_number(now)
            job.job_number = str(job_number)
            job.received_date = now
            job.created_at = now
            job.updated_at = now
            job.check_invariants()

            created = await self.job_repo.create(job)
            await self.audit_trail.record(
                created.id,
                actor.user_id,
                ActivityAction.CREATE_JOB,
                f"Created repair job {created.job_number}",
            )
            return created

        result = await self.run(actor, operation, validate)

        if result.ok:
            record_job_creation(result.value.priority.name.lower())
            logger.info(
                "Job created",
                job_id=str(result.value.id),
                job_number=result.value.job_number,
                created_by=str(actor.user_id),
            )
        return result
