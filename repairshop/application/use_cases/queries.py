"""Read-only use cases: job lookup and search, statistics, activity and low stock."""

from dataclasses import dataclass, field
from typing import Dict, List, Optional
from uuid import UUID

from repairshop.application.interfaces.repositories import (
    JobPartRepositoryInterface,
    JobRecordRepositoryInterface,
    JobRepositoryInterface,
    PartRepositoryInterface,
)
from repairshop.application.services.audit_trail import AuditTrail
from repairshop.application.services.authorization_gate import AuthorizationGate
from repairshop.config.settings import settings
from repairshop.domain.entities.activity_log import ActivityLog
from repairshop.domain.entities.job import Job
from repairshop.domain.entities.job_records import JobImage, RepairRecord
from repairshop.domain.entities.part import JobPart, Part
from repairshop.domain.entities.user import Actor
from repairshop.domain.exceptions import InvalidValueError, NotFoundError
from repairshop.domain.policies.permissions import Action
from repairshop.domain.value_objects.job_priority import JobPriority
from repairshop.domain.value_objects.job_status import JobStatus
from repairshop.infrastructure.database.repositories.transaction_repository import (
    TransactionService,
)

from .base import UseCase
from .result import OperationResult


@dataclass
class JobDetails:
    job: Job
    parts: List[JobPart]
    repair_records: List[RepairRecord] = field(default_factory=list)
    images: List[JobImage] = field(default_factory=list)


@dataclass
class JobPage:
    items: List[Job]
    total: int
    limit: int
    offset: int

    @property
    def has_next(self) -> bool:
        return self.offset + len(self.items) < self.total


@dataclass
class ActivityPage:
    items: List[ActivityLog]
    total: int
    limit: int
    offset: int

    @property
    def has_next(self) -> bool:
        return self.offset + len(self.items) < self.total


@dataclass
class JobStatistics:
    by_status: Dict[JobStatus, int]

    @property
    def total(self) -> int:
        return sum(self.by_status.values())

    @property
    def active(self) -> int:
        return sum(
            count for status, count in self.by_status.items() if not status.is_closed()
        )


class GetJobUseCase(UseCase):
    action = Action.VIEW_JOB

    def __init__(
        self,
        gate: AuthorizationGate,
        transaction_service: TransactionService,
        job_repo: JobRepositoryInterface,
        job_part_repo: JobPartRepositoryInterface,
        record_repo: JobRecordRepositoryInterface,
    ):
        super().__init__(gate, transaction_service)
        self.job_repo = job_repo
        self.job_part_repo = job_part_repo
        self.record_repo = record_repo

    async def execute(self, actor: Actor, job_id: UUID) -> OperationResult[JobDetails]:
        async def operation() -> JobDetails:
            job = await self.job_repo.get_by_id(job_id)
            if job is None:
                raise NotFoundError("Job", job_id)
            return JobDetails(
                job=job,
                parts=await self.job_part_repo.list_by_job(job_id),
                repair_records=await self.record_repo.list_repair_records(job_id),
                images=await self.record_repo.list_images(job_id),
            )

        return await self.run(actor, operation)


class ListJobsUseCase(UseCase):
    """Searches and filters jobs, newest first."""

    action = Action.VIEW_JOB

    def __init__(
        self,
        gate: AuthorizationGate,
        transaction_service: TransactionService,
        job_repo: JobRepositoryInterface,
        max_limit: int = settings.JOB_LIST_MAX_LIMIT,
    ):
        super().__init__(gate, transaction_service)
        self.job_repo = job_repo
        self.max_limit = max_limit

    async def execute(
        self,
        actor: Actor,
        search: Optional[str] = None,
        status: Optional[str] = None,
        technician_id: Optional[UUID] = None,
        priority: Optional[int] = None,
        limit: Optional[int] = None,
        offset: int = 0,
    ) -> OperationResult[JobPage]:
        page_size = settings.JOB_LIST_DEFAULT_LIMIT if limit is None else limit
        text = search.strip() if search else None
        filters = {}

        def validate() -> None:
            if not 1 <= page_size <= self.max_limit:
                raise InvalidValueError("limit", page_size, f"1 to {self.max_limit}")
            if offset < 0:
                raise InvalidValueError("offset", offset, "a non-negative number")
            if status is not None:
                try:
                    filters["status"] = JobStatus(status)
                except ValueError:
                    raise InvalidValueError(
                        "status", status, ", ".join(s.value for s in JobStatus)
                    )
            if priority is not None:
                try:
                    filters["priority"] = JobPriority(priority)
                except ValueError:
                    raise InvalidValueError("priority", priority, "0, 1 or 2")

        async def operation() -> JobPage:
            jobs, total = await self.job_repo.search(
                text=text or None,
                status=filters.get("status"),
                technician_id=technician_id,
                priority=filters.get("priority"),
                limit=page_size,
                offset=offset,
            )
            return JobPage(items=jobs, total=total, limit=page_size, offset=offset)

        return await self.run(actor, operation, validate)


class JobStatisticsUseCase(UseCase):
    action = Action.VIEW_JOB

    def __init__(
        self,
        gate: AuthorizationGate,
        transaction_service: TransactionService,
        job_repo: JobRepositoryInterface,
    ):
        super().__init__(gate, transaction_service)
        self.job_repo = job_repo

    async def execute(self, actor: Actor) -> OperationResult[JobStatistics]:
        async def operation() -> JobStatistics:
            return JobStatistics(by_status=await self.job_repo.status_counts())

        return await self.run(actor, operation)


class ListActivityUseCase(UseCase):
    """Pages through a job's activity log, newest first."""

    action = Action.VIEW_ACTIVITY

    def __init__(
        self,
        gate: AuthorizationGate,
        transaction_service: TransactionService,
        job_repo: JobRepositoryInterface,
        audit_trail: AuditTrail,
        max_limit: int = settings.ACTIVITY_LOG_MAX_LIMIT,
    ):
        super().__init__(gate, transaction_service)
        self.job_repo = job_repo
        self.audit_trail = audit_trail
        self.max_limit = max_limit

    async def execute(
        self,
        actor: Actor,
        job_id: UUID,
        limit: Optional[int] = None,
        offset: int = 0,
    ) -> OperationResult[ActivityPage]:
        page_size = settings.ACTIVITY_LOG_DEFAULT_LIMIT if limit is None else limit

        def validate() -> None:
            if not 1 <= page_size <= self.max_limit:
                raise InvalidValueError("limit", page_size, f"1 to {self.max_limit}")
            if offset < 0:
                raise InvalidValueError("offset", offset, "a non-negative number")

        async def operation() -> ActivityPage:
            if await self.job_repo.get_by_id(job_id) is None:
                raise NotFoundError("Job", job_id)
            items = await self.audit_trail.list_for_job(job_id, limit=page_size, offset=offset)
            total = await self.audit_trail.count_for_job(job_id)
            return ActivityPage(items=items, total=total, limit=page_size, offset=offset)

        return await self.run(actor, operation, validate)


class LowStockUseCase(UseCase):
    """Parts at or below their reorder level."""

    action = Action.VIEW_INVENTORY

    def __init__(
        self,
        gate: AuthorizationGate,
        transaction_service: TransactionService,
        part_repo: PartRepositoryInterface,
    ):
        super().__init__(gate, transaction_service)
        self.part_repo = part_repo

    async def execute(self, actor: Actor, limit: int = 100) -> OperationResult[List[Part]]:
        async def operation() -> List[Part]:
            return await self.part_repo.find_low_stock(limit=limit)

        return await self.run(actor, operation)
