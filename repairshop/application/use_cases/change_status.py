"""Change job status use case."""

from typing import Optional
from uuid import UUID

from repairshop.application.interfaces.repositories import JobRepositoryInterface
from repairshop.application.services.audit_trail import AuditTrail
from repairshop.application.services.authorization_gate import AuthorizationGate
from repairshop.application.services.clock import Clock, utc_now
from repairshop.config.logging import get_logger
from repairshop.domain.entities.job import Job
from repairshop.domain.entities.user import Actor
from repairshop.domain.exceptions import InvalidValueError, NotFoundError
from repairshop.domain.policies.permissions import Action
from repairshop.domain.policies.status_transitions import (
    DEFAULT_TRANSITIONS,
    TransitionTable,
)
from repairshop.domain.value_objects.activity_action import ActivityAction
from repairshop.domain.value_objects.job_status import JobStatus
from repairshop.infrastructure.database.repositories.transaction_repository import (
    TransactionService,
)
from repairshop.infrastructure.monitoring.metrics import record_status_change

from .base import UseCase
from .result import OperationResult

logger = get_logger(__name__)


class ChangeStatusUseCase(UseCase):
    """Use case for moving a job through its workflow."""

    action = Action.CHANGE_STATUS

    def __init__(
        self,
        gate: AuthorizationGate,
        transaction_service: TransactionService,
        job_repo: JobRepositoryInterface,
        audit_trail: AuditTrail,
        transitions: TransitionTable = DEFAULT_TRANSITIONS,
        clock: Optional[Clock] = None,
    ):
        super().__init__(gate, transaction_service)
        self.job_repo = job_repo
        self.audit_trail = audit_trail
        self.transitions = transitions
        self.clock = clock or utc_now

    async def execute(
        self,
        actor: Actor,
        job_id: UUID,
        new_status: str,
        note: Optional[str] = None,
    ) -> OperationResult[Job]:
        target: Optional[JobStatus] = None

        def validate() -> None:
            nonlocal target
            try:
                target = JobStatus(new_status)
            except ValueError:
                raise InvalidValueError(
                    "status", new_status, ", ".join(s.value for s in JobStatus)
                )

        async def operation() -> Job:
            job = await self.job_repo.get_by_id(job_id, for_update=True)
            if job is None:
                raise NotFoundError("Job", job_id)

            old_status = job.change_status(target, self.transitions, now=self.clock())
            job.check_invariants()
            updated = await self.job_repo.update(job)

            description = f"Changed status from {old_status.value} to {target.value}"
            if note:
                description += f": {note}"
            await self.audit_trail.record(
                job.id, actor.user_id, ActivityAction.CHANGE_STATUS, description
            )

            record_status_change(old_status.value, target.value)
            logger.info(
                "Job status changed",
                job_id=str(job.id),
                job_number=job.job_number,
                from_status=old_status.value,
                to_status=target.value,
            )
            return updated

        return await self.run(actor, operation, validate)
