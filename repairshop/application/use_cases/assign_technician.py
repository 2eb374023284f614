"""Assign technician use case."""

from typing import Optional
from uuid import UUID

from repairshop.application.interfaces.repositories import (
    DirectoryRepositoryInterface,
    JobRepositoryInterface,
)
from repairshop.application.services.audit_trail import AuditTrail
from repairshop.application.services.authorization_gate import AuthorizationGate
from repairshop.application.services.clock import Clock, utc_now
from repairshop.config.logging import get_logger
from repairshop.domain.entities.job import Job
from repairshop.domain.entities.user import Actor
from repairshop.domain.exceptions import NotFoundError
from repairshop.domain.policies.permissions import Action
from repairshop.domain.value_objects.activity_action import ActivityAction
from repairshop.infrastructure.database.repositories.transaction_repository import (
    TransactionService,
)

from .base import UseCase
from .result import OperationResult

logger = get_logger(__name__)


class AssignTechnicianUseCase(UseCase):
    """Use case for (re)assigning the technician responsible for a job."""

    action = Action.ASSIGN_TECHNICIAN

    def __init__(
        self,
        gate: AuthorizationGate,
        transaction_service: TransactionService,
        job_repo: JobRepositoryInterface,
        directory_repo: DirectoryRepositoryInterface,
        audit_trail: AuditTrail,
        clock: Optional[Clock] = None,
    ):
        super().__init__(gate, transaction_service)
        self.job_repo = job_repo
        self.directory_repo = directory_repo
        self.audit_trail = audit_trail
        self.clock = clock or utc_now

    async def execute(
        self,
        actor: Actor,
        job_id: UUID,
        technician_id: UUID,
        note: Optional[str] = None,
    ) -> OperationResult[Job]:
        async def operation() -> Job:
            job = await self.job_repo.get_by_id(job_id, for_update=True)
            if job is None:
                raise NotFoundError("Job", job_id)
            technician = await self.directory_repo.get_user(technician_id)
            if technician is None:
                raise NotFoundError("Technician", technician_id)

            previous = job.assign_technician(technician, now=self.clock())
            updated = await self.job_repo.update(job)

            situation = "replacing existing technician" if previous else "no technician yet"
            description = f"Assigned technician {technician.display_name} ({situation})"
            if note:
                description += f": {note}"
            await self.audit_trail.record(
                job.id, actor.user_id, ActivityAction.ASSIGN_TECHNICIAN, description
            )

            logger.info(
                "Technician assigned",
                job_id=str(job.id),
                technician_id=str(technician.id),
                previous_technician_id=str(previous) if previous else None,
            )
            return updated

        return await self.run(actor, operation)
