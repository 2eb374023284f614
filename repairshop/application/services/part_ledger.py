"""
Part ledger: moves stock between inventory and jobs.
"""

from decimal import Decimal
from typing import Optional
from uuid import UUID

from repairshop.application.interfaces.repositories import (
    JobPartRepositoryInterface,
    PartRepositoryInterface,
)
from repairshop.application.services.audit_trail import AuditTrail
from repairshop.config.logging import get_logger
from repairshop.domain.entities.job import Job
from repairshop.domain.entities.part import MAX_QUANTITY, JobPart
from repairshop.domain.entities.user import Actor
from repairshop.domain.exceptions import (
    InsufficientStockError,
    InvalidValueError,
    NotFoundError,
)
from repairshop.domain.value_objects.activity_action import ActivityAction
from repairshop.infrastructure.monitoring.metrics import (
    record_part_movement,
    record_stock_rejection,
)

logger = get_logger(__name__)


class PartLedger:
    """
    Withdraws parts for jobs and returns them to stock.

    Every method runs inside the caller's transaction. The stock change, the
    ledger row and the activity entry commit together or not at all.
    """

    def __init__(
        self,
        part_repo: PartRepositoryInterface,
        job_part_repo: JobPartRepositoryInterface,
        audit_trail: AuditTrail,
    ):
        self.part_repo = part_repo
        self.job_part_repo = job_part_repo
        self.audit_trail = audit_trail

    async def withdraw(
        self,
        job: Job,
        part_id: UUID,
        quantity: int,
        actor: Actor,
        unit_price: Optional[Decimal] = None,
        notes: Optional[str] = None,
    ) -> JobPart:
        """
        Take ``quantity`` of a part out of stock for ``job``.

        ``unit_price`` defaults to the part's current price and is frozen on
        the ledger row; later price changes do not touch it.
        """
        if not 1 <= quantity <= MAX_QUANTITY:
            raise InvalidValueError("quantity", quantity, f"1 to {MAX_QUANTITY}")

        reserved = await self.part_repo.try_decrement_stock(part_id, quantity)
        part = await self.part_repo.get_by_id(part_id)
        if part is None:
            raise NotFoundError("Part", part_id)
        if not reserved:
            record_stock_rejection()
            logger.info(
                "Withdrawal refused",
                job_id=str(job.id),
                part_number=part.part_number,
                available=part.stock_qty,
                requested=quantity,
            )
            raise InsufficientStockError(part.part_number, part.stock_qty, quantity)

        job_part = await self.job_part_repo.create(
            JobPart(
                job_id=job.id,
                part_id=part.id,
                quantity=quantity,
                unit_price=part.unit_price if unit_price is None else unit_price,
                notes=notes,
            )
        )
        job_part.part = part

        await self.audit_trail.record(
            job.id,
            actor.user_id,
            ActivityAction.ADD_PART,
            f"Withdrew {quantity} x {part.part_name} ({part.part_number})",
        )
        record_part_movement("withdrawn", quantity)

        logger.info(
            "Part withdrawn",
            job_id=str(job.id),
            part_number=part.part_number,
            quantity=quantity,
            remaining=part.stock_qty,
        )
        return job_part

    async def return_part(self, job: Job, job_part_id: UUID, actor: Actor) -> JobPart:
        """Undo a withdrawal: restore its quantity and delete the ledger row."""
        job_part = await self.job_part_repo.get_for_job(job.id, job_part_id)
        if job_part is None:
            raise NotFoundError("Job part", job_part_id)

        await self.part_repo.increment_stock(job_part.part_id, job_part.quantity)
        await self.job_part_repo.delete(job_part.id)
        part = await self.part_repo.get_by_id(job_part.part_id)
        job_part.part = part

        await self.audit_trail.record(
            job.id,
            actor.user_id,
            ActivityAction.REMOVE_PART,
            f"Returned {job_part.quantity} x {part.part_name} ({part.part_number})",
        )
        record_part_movement("returned", job_part.quantity)

        logger.info(
            "Part returned",
            job_id=str(job.id),
            part_number=part.part_number,
            quantity=job_part.quantity,
            stock=part.stock_qty,
        )
        return job_part

    async def restore_all(self, job_id: UUID) -> int:
        """Put every part withdrawn for a job back into stock. Returns units restored."""
        restored = 0
        for job_part in await self.job_part_repo.list_by_job(job_id):
            await self.part_repo.increment_stock(job_part.part_id, job_part.quantity)
            restored += job_part.quantity
        if restored:
            record_part_movement("returned", restored)
        return restored
