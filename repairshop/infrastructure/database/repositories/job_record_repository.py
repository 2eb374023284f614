"""Repair record and job image repository implementation."""

from typing import List, Optional
from uuid import UUID

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from repairshop.application.interfaces.repositories import JobRecordRepositoryInterface
from repairshop.domain.entities.job_records import JobImage, RepairRecord
from repairshop.infrastructure.database.models.base import utcnow
from repairshop.infrastructure.database.models.job_records import (
    JobImageModel,
    RepairRecordModel,
)


class JobRecordRepository(JobRecordRepositoryInterface):
    """Repair records and job image metadata."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def add_repair_record(self, record: RepairRecord) -> RepairRecord:
        model = RepairRecordModel(
            id=record.id,
            job_id=record.job_id,
            description=record.description,
            findings=record.findings,
            actions=record.actions,
            created_by=record.created_by,
            created_at=record.created_at or utcnow(),
        )
        self.db.add(model)
        await self.db.flush()

        return self._record_to_entity(model)

    async def list_repair_records(self, job_id: UUID) -> List[RepairRecord]:
        stmt = (
            select(RepairRecordModel)
            .where(RepairRecordModel.job_id == job_id)
            .order_by(RepairRecordModel.created_at.desc())
        )
        result = await self.db.execute(stmt)
        return [self._record_to_entity(model) for model in result.scalars().all()]

    async def add_images(self, images: List[JobImage]) -> List[JobImage]:
        models = [
            JobImageModel(
                id=image.id,
                job_id=image.job_id,
                image_url=image.image_url,
                image_type=image.image_type,
                caption=image.caption,
                created_at=image.created_at or utcnow(),
            )
            for image in images
        ]
        self.db.add_all(models)
        await self.db.flush()

        return [self._image_to_entity(model) for model in models]

    async def list_images(self, job_id: UUID) -> List[JobImage]:
        stmt = (
            select(JobImageModel)
            .where(JobImageModel.job_id == job_id)
            .order_by(JobImageModel.created_at.desc())
        )
        result = await self.db.execute(stmt)
        return [self._image_to_entity(model) for model in result.scalars().all()]

    async def get_image(self, job_id: UUID, image_id: UUID) -> Optional[JobImage]:
        stmt = select(JobImageModel).where(
            JobImageModel.id == image_id, JobImageModel.job_id == job_id
        )
        result = await self.db.execute(stmt)
        model = result.scalar_one_or_none()

        return self._image_to_entity(model) if model else None

    async def delete_image(self, image_id: UUID) -> None:
        await self.db.execute(
            delete(JobImageModel)
            .where(JobImageModel.id == image_id)
            .execution_options(synchronize_session=False)
        )

    def _record_to_entity(self, model: RepairRecordModel) -> RepairRecord:
        return RepairRecord(
            id=model.id,
            job_id=model.job_id,
            description=model.description,
            findings=model.findings,
            actions=model.actions,
            created_by=model.created_by,
            created_at=model.created_at,
        )

    def _image_to_entity(self, model: JobImageModel) -> JobImage:
        return JobImage(
            id=model.id,
            job_id=model.job_id,
            image_url=model.image_url,
            image_type=model.image_type,
            caption=model.caption,
            created_at=model.created_at,
        )
