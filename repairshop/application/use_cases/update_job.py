"""Update job use case."""

from typing import Any, Dict, Optional
from uuid import UUID

from repairshop.application.interfaces.repositories import (
    DirectoryRepositoryInterface,
    JobRepositoryInterface,
)
from repairshop.application.services.audit_trail import AuditTrail
from repairshop.application.services.authorization_gate import AuthorizationGate
from repairshop.application.services.clock import Clock, utc_now
from repairshop.config.logging import get_logger
from repairshop.domain.entities.job import EDITABLE_FIELDS, Job
from repairshop.domain.entities.user import Actor
from repairshop.domain.exceptions import NotFoundError, ValidationError
from repairshop.domain.policies.permissions import Action
from repairshop.domain.value_objects.activity_action import ActivityAction
from repairshop.infrastructure.database.repositories.transaction_repository import (
    TransactionService,
)

from .base import UseCase
from .create_job import check_job_references
from .result import OperationResult

logger = get_logger(__name__)


class UpdateJobUseCase(UseCase):
    """Use case for correcting intake details of a job."""

    action = Action.UPDATE_JOB

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
        self, actor: Actor, job_id: UUID, changes: Dict[str, Any]
    ) -> OperationResult[Job]:
        """Apply ``changes`` (only the fields the caller sent) to the job."""

        def validate() -> None:
            if not changes:
                raise ValidationError("No changes supplied")
            unknown = sorted(set(changes) - EDITABLE_FIELDS)
            if unknown:
                raise ValidationError(
                    f"Fields cannot be updated: {', '.join(unknown)}", {"fields": unknown}
                )

        async def operation() -> Job:
            job = await self.job_repo.get_by_id(job_id, for_update=True)
            if job is None:
                raise NotFoundError("Job", job_id)

            changed = job.update_details(changes, now=self.clock())
            await check_job_references(
                self.directory_repo,
                customer_id=changes.get("customer_id"),
                miner_model_id=changes.get("miner_model_id"),
                warranty_profile_id=changes.get("warranty_profile_id"),
            )
            updated = await self.job_repo.update(job)

            fields = ", ".join(changed) if changed else "no field values changed"
            await self.audit_trail.record(
                job.id,
                actor.user_id,
                ActivityAction.UPDATE_JOB,
                f"Updated repair job {job.job_number} ({fields})",
            )

            logger.info("Job updated", job_id=str(job.id), fields=changed)
            return updated

        return await self.run(actor, operation, validate)
