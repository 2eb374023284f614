"""Job image use cases. Only metadata is stored; the files live elsewhere."""

from dataclasses import dataclass
from typing import List, Optional
from uuid import UUID

from repairshop.application.interfaces.repositories import (
    JobRecordRepositoryInterface,
    JobRepositoryInterface,
)
from repairshop.application.services.audit_trail import AuditTrail
from repairshop.application.services.authorization_gate import AuthorizationGate
from repairshop.application.services.clock import Clock, utc_now
from repairshop.domain.entities.job_records import JobImage
from repairshop.domain.entities.user import Actor
from repairshop.domain.exceptions import InvalidValueError, NotFoundError, ValidationError
from repairshop.domain.policies.permissions import Action
from repairshop.domain.value_objects.activity_action import ActivityAction
from repairshop.infrastructure.database.repositories.transaction_repository import (
    TransactionService,
)

from .base import UseCase
from .result import OperationResult

IMAGE_TYPES = frozenset({"BEFORE", "AFTER", "DIAGNOSTIC", "PARTS", "OTHER"})


@dataclass
class ImageUpload:
    image_url: str
    caption: Optional[str] = None


class AttachImagesUseCase(UseCase):
    """Use case for recording uploaded photos against a job."""

    action = Action.UPLOAD_IMAGES

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
        self,
        actor: Actor,
        job_id: UUID,
        uploads: List[ImageUpload],
        image_type: str = "OTHER",
    ) -> OperationResult[List[JobImage]]:
        category = (image_type or "OTHER").upper()

        def validate() -> None:
            if not uploads:
                raise ValidationError("No images supplied")
            if category not in IMAGE_TYPES:
                raise InvalidValueError(
                    "image_type", image_type, ", ".join(sorted(IMAGE_TYPES))
                )
            if any(not upload.image_url or not upload.image_url.strip() for upload in uploads):
                raise ValidationError("Every image needs a URL")

        async def operation() -> List[JobImage]:
            job = await self.job_repo.get_by_id(job_id)
            if job is None:
                raise NotFoundError("Job", job_id)

            now = self.clock()
            images = await self.record_repo.add_images(
                [
                    JobImage(
                        job_id=job.id,
                        image_url=upload.image_url.strip(),
                        image_type=category,
                        caption=upload.caption,
                        created_at=now,
                    )
                    for upload in uploads
                ]
            )
            await self.audit_trail.record(
                job.id,
                actor.user_id,
                ActivityAction.UPLOAD_IMAGES,
                f"Uploaded {len(images)} image(s) ({category})",
            )
            return images

        return await self.run(actor, operation, validate)


class DeleteImageUseCase(UseCase):
    """Use case for removing a photo from a job."""

    action = Action.DELETE_IMAGE

    def __init__(
        self,
        gate: AuthorizationGate,
        transaction_service: TransactionService,
        job_repo: JobRepositoryInterface,
        record_repo: JobRecordRepositoryInterface,
        audit_trail: AuditTrail,
    ):
        super().__init__(gate, transaction_service)
        self.job_repo = job_repo
        self.record_repo = record_repo
        self.audit_trail = audit_trail

    async def execute(
        self, actor: Actor, job_id: UUID, image_id: UUID
    ) -> OperationResult[JobImage]:
        async def operation() -> JobImage:
            image = await self.record_repo.get_image(job_id, image_id)
            if image is None:
                raise NotFoundError("Image", image_id)

            await self.record_repo.delete_image(image.id)
            await self.audit_trail.record(
                job_id,
                actor.user_id,
                ActivityAction.DELETE_IMAGE,
                f"Deleted image: {image.caption or image.image_type}",
            )
            return image

        return await self.run(actor, operation)
