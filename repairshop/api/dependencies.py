"""
FastAPI dependency injection container.

Every request gets its own session; repositories, the transaction service and
the use cases built on them share it, so one request is one unit of work.
"""

from functools import lru_cache
from typing import Annotated, Optional
from uuid import UUID

from fastapi import Depends, Header, HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession

from repairshop.application.services.audit_trail import AuditTrail
from repairshop.application.services.authorization_gate import AuthorizationGate
from repairshop.application.services.clock import Clock, utc_now
from repairshop.application.services.job_number_sequencer import JobNumberSequencer
from repairshop.application.services.part_ledger import PartLedger
from repairshop.application.services.retry_handler import RetryHandler
from repairshop.application.use_cases import (
    AddRepairRecordUseCase,
    AssignTechnicianUseCase,
    AttachImagesUseCase,
    ChangeStatusUseCase,
    CreateJobUseCase,
    DeleteImageUseCase,
    DeleteJobUseCase,
    GetJobUseCase,
    JobStatisticsUseCase,
    ListActivityUseCase,
    ListJobsUseCase,
    LowStockUseCase,
    ReturnPartUseCase,
    UpdateJobUseCase,
    WithdrawPartUseCase,
)
from repairshop.config.database import get_db_session
from repairshop.config.logging import get_logger
from repairshop.domain.entities.user import Actor
from repairshop.domain.value_objects.role import Role
from repairshop.infrastructure.database.repositories import (
    ActivityLogRepository,
    DirectoryRepository,
    JobNumberSequenceRepository,
    JobPartRepository,
    JobRecordRepository,
    JobRepository,
    PartRepository,
    TransactionService,
)

logger = get_logger(__name__)

SessionDep = Annotated[AsyncSession, Depends(get_db_session)]


# Caller identity
async def get_current_actor(
    x_user_id: Annotated[Optional[str], Header()] = None,
    x_user_role: Annotated[Optional[str], Header()] = None,
) -> Actor:
    """Resolve the actor forwarded by the authentication layer."""
    if not x_user_id or not x_user_role:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Missing X-User-Id or X-User-Role header",
        )
    try:
        return Actor(user_id=UUID(x_user_id), role=Role(x_user_role.lower()))
    except ValueError:
        logger.warning("Rejected malformed identity headers", role=x_user_role)
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Malformed X-User-Id or X-User-Role header",
        )


# Stateless services
@lru_cache(maxsize=1)
def get_authorization_gate() -> AuthorizationGate:
    """Get authorization gate instance."""
    return AuthorizationGate()


def get_clock() -> Clock:
    return utc_now


async def get_retry_handler() -> RetryHandler:
    """Get retry handler instance."""
    return RetryHandler()


# Database Dependencies
async def get_transaction_service(db: SessionDep) -> TransactionService:
    return TransactionService(db)


async def get_job_repository(db: SessionDep) -> JobRepository:
    """Get job repository instance."""
    return JobRepository(db)


async def get_part_repository(db: SessionDep) -> PartRepository:
    return PartRepository(db)


async def get_job_part_repository(db: SessionDep) -> JobPartRepository:
    return JobPartRepository(db)


async def get_directory_repository(db: SessionDep) -> DirectoryRepository:
    return DirectoryRepository(db)


async def get_job_record_repository(db: SessionDep) -> JobRecordRepository:
    return JobRecordRepository(db)


async def get_audit_trail(
    db: SessionDep, clock: Annotated[Clock, Depends(get_clock)]
) -> AuditTrail:
    return AuditTrail(ActivityLogRepository(db), clock=clock)


async def get_job_number_sequencer(
    db: SessionDep, job_repo: Annotated[JobRepository, Depends(get_job_repository)]
) -> JobNumberSequencer:
    return JobNumberSequencer(JobNumberSequenceRepository(db), job_repo)


async def get_part_ledger(
    part_repo: Annotated[PartRepository, Depends(get_part_repository)],
    job_part_repo: Annotated[JobPartRepository, Depends(get_job_part_repository)],
    audit_trail: Annotated[AuditTrail, Depends(get_audit_trail)],
) -> PartLedger:
    return PartLedger(part_repo, job_part_repo, audit_trail)


# Type aliases for cleaner dependency injection
ActorDep = Annotated[Actor, Depends(get_current_actor)]
GateDep = Annotated[AuthorizationGate, Depends(get_authorization_gate)]
ClockDep = Annotated[Clock, Depends(get_clock)]
RetryHandlerDep = Annotated[RetryHandler, Depends(get_retry_handler)]
TransactionServiceDep = Annotated[TransactionService, Depends(get_transaction_service)]
JobRepositoryDep = Annotated[JobRepository, Depends(get_job_repository)]
PartRepositoryDep = Annotated[PartRepository, Depends(get_part_repository)]
JobPartRepositoryDep = Annotated[JobPartRepository, Depends(get_job_part_repository)]
DirectoryRepositoryDep = Annotated[DirectoryRepository, Depends(get_directory_repository)]
JobRecordRepositoryDep = Annotated[
    JobRecordRepository, Depends(get_job_record_repository)
]
AuditTrailDep = Annotated[AuditTrail, Depends(get_audit_trail)]
JobNumberSequencerDep = Annotated[JobNumberSequencer, Depends(get_job_number_sequencer)]
PartLedgerDep = Annotated[PartLedger, Depends(get_part_ledger)]


# Use cases
async def get_create_job_use_case(
    gate: GateDep,
    tx: TransactionServiceDep,
    job_repo: JobRepositoryDep,
    directory_repo: DirectoryRepositoryDep,
    sequencer: JobNumberSequencerDep,
    audit_trail: AuditTrailDep,
    clock: ClockDep,
) -> CreateJobUseCase:
    return CreateJobUseCase(
        gate, tx, job_repo, directory_repo, sequencer, audit_trail, clock=clock
    )


async def get_update_job_use_case(
    gate: GateDep,
    tx: TransactionServiceDep,
    job_repo: JobRepositoryDep,
    directory_repo: DirectoryRepositoryDep,
    audit_trail: AuditTrailDep,
    clock: ClockDep,
) -> UpdateJobUseCase:
    return UpdateJobUseCase(gate, tx, job_repo, directory_repo, audit_trail, clock=clock)


async def get_change_status_use_case(
    gate: GateDep,
    tx: TransactionServiceDep,
    job_repo: JobRepositoryDep,
    audit_trail: AuditTrailDep,
    clock: ClockDep,
) -> ChangeStatusUseCase:
    return ChangeStatusUseCase(gate, tx, job_repo, audit_trail, clock=clock)


async def get_assign_technician_use_case(
    gate: GateDep,
    tx: TransactionServiceDep,
    job_repo: JobRepositoryDep,
    directory_repo: DirectoryRepositoryDep,
    audit_trail: AuditTrailDep,
    clock: ClockDep,
) -> AssignTechnicianUseCase:
    return AssignTechnicianUseCase(
        gate, tx, job_repo, directory_repo, audit_trail, clock=clock
    )


async def get_delete_job_use_case(
    gate: GateDep,
    tx: TransactionServiceDep,
    job_repo: JobRepositoryDep,
    part_ledger: PartLedgerDep,
) -> DeleteJobUseCase:
    return DeleteJobUseCase(gate, tx, job_repo, part_ledger)


async def get_withdraw_part_use_case(
    gate: GateDep,
    tx: TransactionServiceDep,
    job_repo: JobRepositoryDep,
    part_ledger: PartLedgerDep,
) -> WithdrawPartUseCase:
    return WithdrawPartUseCase(gate, tx, job_repo, part_ledger)


async def get_return_part_use_case(
    gate: GateDep,
    tx: TransactionServiceDep,
    job_repo: JobRepositoryDep,
    part_ledger: PartLedgerDep,
) -> ReturnPartUseCase:
    return ReturnPartUseCase(gate, tx, job_repo, part_ledger)


async def get_add_repair_record_use_case(
    gate: GateDep,
    tx: TransactionServiceDep,
    job_repo: JobRepositoryDep,
    record_repo: JobRecordRepositoryDep,
    audit_trail: AuditTrailDep,
    clock: ClockDep,
) -> AddRepairRecordUseCase:
    return AddRepairRecordUseCase(
        gate, tx, job_repo, record_repo, audit_trail, clock=clock
    )


async def get_attach_images_use_case(
    gate: GateDep,
    tx: TransactionServiceDep,
    job_repo: JobRepositoryDep,
    record_repo: JobRecordRepositoryDep,
    audit_trail: AuditTrailDep,
    clock: ClockDep,
) -> AttachImagesUseCase:
    return AttachImagesUseCase(gate, tx, job_repo, record_repo, audit_trail, clock=clock)


async def get_delete_image_use_case(
    gate: GateDep,
    tx: TransactionServiceDep,
    job_repo: JobRepositoryDep,
    record_repo: JobRecordRepositoryDep,
    audit_trail: AuditTrailDep,
) -> DeleteImageUseCase:
    return DeleteImageUseCase(gate, tx, job_repo, record_repo, audit_trail)


async def get_get_job_use_case(
    gate: GateDep,
    tx: TransactionServiceDep,
    job_repo: JobRepositoryDep,
    job_part_repo: JobPartRepositoryDep,
    record_repo: JobRecordRepositoryDep,
) -> GetJobUseCase:
    return GetJobUseCase(gate, tx, job_repo, job_part_repo, record_repo)


async def get_list_jobs_use_case(
    gate: GateDep, tx: TransactionServiceDep, job_repo: JobRepositoryDep
) -> ListJobsUseCase:
    return ListJobsUseCase(gate, tx, job_repo)


async def get_job_statistics_use_case(
    gate: GateDep, tx: TransactionServiceDep, job_repo: JobRepositoryDep
) -> JobStatisticsUseCase:
    return JobStatisticsUseCase(gate, tx, job_repo)


async def get_list_activity_use_case(
    gate: GateDep,
    tx: TransactionServiceDep,
    job_repo: JobRepositoryDep,
    audit_trail: AuditTrailDep,
) -> ListActivityUseCase:
    return ListActivityUseCase(gate, tx, job_repo, audit_trail)


async def get_low_stock_use_case(
    gate: GateDep, tx: TransactionServiceDep, part_repo: PartRepositoryDep
) -> LowStockUseCase:
    return LowStockUseCase(gate, tx, part_repo)
