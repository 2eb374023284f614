"""Job repository implementation."""

from typing import Dict, List, Optional, Tuple
from uuid import UUID

from sqlalchemy import delete, func, or_, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from repairshop.application.interfaces.repositories import JobRepositoryInterface
from repairshop.config.logging import get_logger
from repairshop.domain.entities.job import Job
from repairshop.domain.exceptions import JobNumberConflictError, NotFoundError
from repairshop.domain.value_objects.job_status import JobStatus
from repairshop.infrastructure.database.models.activity_log import ActivityLogModel
from repairshop.infrastructure.database.models.billing import PaymentModel, QuotationModel
from repairshop.infrastructure.database.models.customer import CustomerModel
from repairshop.infrastructure.database.models.job import JobModel
from repairshop.infrastructure.database.models.job_part import JobPartModel
from repairshop.infrastructure.database.models.job_records import (
    JobImageModel,
    RepairRecordModel,
)

logger = get_logger(__name__)

# Columns copied verbatim between the entity and the model on update.
_MUTABLE_COLUMNS = (
    "customer_id",
    "miner_model_id",
    "warranty_profile_id",
    "technician_id",
    "serial_number",
    "problem_description",
    "customer_notes",
    "estimated_done_date",
    "completed_date",
    "updated_at",
)


class JobRepository(JobRepositoryInterface):
    """Job repository implementation."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def get_by_id(self, job_id: UUID, for_update: bool = False) -> Optional[Job]:
        """Get job by ID."""
        stmt = select(JobModel).where(JobModel.id == job_id)
        if for_update:
            # SQLite ignores FOR UPDATE; its writers serialize on the file lock
            stmt = stmt.with_for_update()
        stmt = stmt.execution_options(populate_existing=True)
        result = await self.db.execute(stmt)
        model = result.scalar_one_or_none()

        return self._model_to_entity(model) if model else None

    async def create(self, job: Job) -> Job:
        """Create a new job."""
        job_model = JobModel(
            id=job.id,
            job_number=job.job_number,
            customer_id=job.customer_id,
            miner_model_id=job.miner_model_id,
            warranty_profile_id=job.warranty_profile_id,
            technician_id=job.technician_id,
            created_by_id=job.created_by_id,
            serial_number=job.serial_number,
            problem_description=job.problem_description,
            customer_notes=job.customer_notes,
            status=job.status.value,
            priority=int(job.priority),
            received_date=job.received_date,
            estimated_done_date=job.estimated_done_date,
            completed_date=job.completed_date,
            created_at=job.created_at,
            updated_at=job.updated_at,
        )

        self.db.add(job_model)
        try:
            # Use flush instead of commit to maintain transaction atomicity
            await self.db.flush()
        except IntegrityError as e:
            if "job_number" in str(e.orig):
                logger.warning("Job number collision", job_number=job.job_number)
                raise JobNumberConflictError(job.job_number) from e
            raise

        return self._model_to_entity(job_model)

    async def update(self, job: Job) -> Job:
        """Update an existing job."""
        stmt = select(JobModel).where(JobModel.id == job.id)
        result = await self.db.execute(stmt)
        job_model = result.scalar_one_or_none()

        if not job_model:
            raise NotFoundError("Job", job.id)

        for column in _MUTABLE_COLUMNS:
            setattr(job_model, column, getattr(job, column))
        job_model.status = job.status.value
        job_model.priority = int(job.priority)

        await self.db.flush()

        return self._model_to_entity(job_model)

    async def delete(self, job_id: UUID) -> None:
        """Delete a job and every row it owns."""
        for model in (JobPartModel, ActivityLogModel, RepairRecordModel, JobImageModel):
            await self.db.execute(
                delete(model)
                .where(model.job_id == job_id)
                .execution_options(synchronize_session=False)
            )
        await self.db.execute(
            delete(JobModel)
            .where(JobModel.id == job_id)
            .execution_options(synchronize_session=False)
        )

    async def count_billing_records(self, job_id: UUID) -> Dict[str, int]:
        """Count quotations and payments that block deletion."""
        counts = {}
        for name, model in (("quotations", QuotationModel), ("payments", PaymentModel)):
            stmt = select(func.count()).select_from(model).where(model.job_id == job_id)
            counts[name] = (await self.db.execute(stmt)).scalar_one()
        return counts

    async def highest_job_number(self, prefix: str) -> Optional[str]:
        """
        Highest job number starting with ``prefix``.

        Sequences may outgrow their zero padding (``RJ2025-10000``), so numbers
        are ordered by length first and lexically second.
        """
        stmt = (
            select(JobModel.job_number)
            .where(JobModel.job_number.startswith(prefix, autoescape=True))
            .order_by(func.length(JobModel.job_number).desc(), JobModel.job_number.desc())
            .limit(1)
        )
        result = await self.db.execute(stmt)
        return result.scalar_one_or_none()

    async def status_counts(self) -> Dict[JobStatus, int]:
        """Number of jobs per status, zero for statuses with no jobs."""
        stmt = select(JobModel.status, func.count()).group_by(JobModel.status)
        result = await self.db.execute(stmt)
        counts = {status: 0 for status in JobStatus}
        for status, count in result.all():
            counts[JobStatus(status)] = count
        return counts

    async def search(
        self,
        text: Optional[str] = None,
        status: Optional[JobStatus] = None,
        technician_id: Optional[UUID] = None,
        priority: Optional[int] = None,
        limit: int = 20,
        offset: int = 0,
    ) -> Tuple[List[Job], int]:
        """
        Jobs matching every given filter, newest first.

        ``text`` matches case-insensitively anywhere in the job number, the
        serial number, or the customer's name or phone.
        """
        conditions = []
        if text:
            conditions.append(
                or_(
                    JobModel.job_number.icontains(text, autoescape=True),
                    JobModel.serial_number.icontains(text, autoescape=True),
                    CustomerModel.full_name.icontains(text, autoescape=True),
                    CustomerModel.phone.icontains(text, autoescape=True),
                )
            )
        if status is not None:
            conditions.append(JobModel.status == status.value)
        if technician_id is not None:
            conditions.append(JobModel.technician_id == technician_id)
        if priority is not None:
            conditions.append(JobModel.priority == int(priority))

        stmt = select(JobModel).outerjoin(
            CustomerModel, CustomerModel.id == JobModel.customer_id
        )
        count_stmt = (
            select(func.count(JobModel.id))
            .select_from(JobModel)
            .outerjoin(CustomerModel, CustomerModel.id == JobModel.customer_id)
        )
        for condition in conditions:
            stmt = stmt.where(condition)
            count_stmt = count_stmt.where(condition)

        # Jobs created in the same instant fall back to job number order
        stmt = (
            stmt.order_by(
                JobModel.created_at.desc(),
                func.length(JobModel.job_number).desc(),
                JobModel.job_number.desc(),
            )
            .limit(limit)
            .offset(offset)
        )

        result = await self.db.execute(stmt)
        jobs = [self._model_to_entity(model) for model in result.scalars().all()]
        total = (await self.db.execute(count_stmt)).scalar_one()
        return jobs, total

    def _model_to_entity(self, model: JobModel) -> Job:
        """Convert SQLAlchemy model to domain entity."""
        return Job(
            id=model.id,
            job_number=model.job_number,
            customer_id=model.customer_id,
            miner_model_id=model.miner_model_id,
            warranty_profile_id=model.warranty_profile_id,
            technician_id=model.technician_id,
            created_by_id=model.created_by_id,
            serial_number=model.serial_number,
            problem_description=model.problem_description,
            customer_notes=model.customer_notes,
            status=JobStatus(model.status),
            priority=model.priority,
            received_date=model.received_date,
            estimated_done_date=model.estimated_done_date,
            completed_date=model.completed_date,
            created_at=model.created_at,
            updated_at=model.updated_at,
        )
