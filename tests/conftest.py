"""
Pytest configuration and fixtures.
"""

from datetime import datetime, timedelta, timezone
from decimal import Decimal
from types import SimpleNamespace
from typing import AsyncGenerator
from unittest.mock import AsyncMock
from uuid import uuid4

import pytest
import pytest_asyncio
from sqlalchemy.ext.asyncio import AsyncSession

from repairshop.application.interfaces.repositories import (
    ActivityLogRepositoryInterface,
    DirectoryRepositoryInterface,
    JobNumberSequenceRepositoryInterface,
    JobPartRepositoryInterface,
    JobRecordRepositoryInterface,
    JobRepositoryInterface,
    PartRepositoryInterface,
)
from repairshop.application.services.audit_trail import AuditTrail
from repairshop.application.services.authorization_gate import AuthorizationGate
from repairshop.application.services.job_number_sequencer import JobNumberSequencer
from repairshop.application.services.part_ledger import PartLedger
from repairshop.application.use_cases import (
    AddRepairRecordUseCase,
    AssignTechnicianUseCase,
    AttachImagesUseCase,
    ChangeStatusUseCase,
    CreateJobRequest,
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
from repairshop.config.database import create_engine, create_session_factory
from repairshop.domain.entities.user import Actor
from repairshop.domain.value_objects.role import Role
from repairshop.infrastructure.database.models import (
    Base,
    CustomerModel,
    MinerModelModel,
    PartModel,
    UserModel,
    WarrantyProfileModel,
)
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


class FixedClock:
    """Controllable clock handed to services instead of the wall clock."""

    def __init__(self, now: datetime):
        self.now = now

    def __call__(self) -> datetime:
        return self.now

    def advance(self, **kwargs) -> datetime:
        self.now = self.now + timedelta(**kwargs)
        return self.now


def naive(value: datetime) -> datetime:
    """SQLite hands datetimes back without tzinfo."""
    return value.replace(tzinfo=None) if value else value


@pytest.fixture
def clock():
    """Clock fixed at 2025-03-14 09:30 UTC."""
    return FixedClock(datetime(2025, 3, 14, 9, 30, tzinfo=timezone.utc))


@pytest.fixture
def gate():
    return AuthorizationGate()


# Database fixtures


@pytest_asyncio.fixture
async def test_engine(tmp_path):
    """File-backed SQLite engine so separate sessions really run concurrently."""
    engine = create_engine(f"sqlite+aiosqlite:///{tmp_path / 'repairshop.db'}")

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    await engine.dispose()


@pytest.fixture
def session_factory(test_engine):
    return create_session_factory(test_engine)


@pytest_asyncio.fixture
async def db_session(session_factory) -> AsyncGenerator[AsyncSession, None]:
    """Create test database session."""
    async with session_factory() as session:
        yield session
        await session.rollback()


@pytest_asyncio.fixture
async def seed(session_factory):
    """Staff, one customer, one miner model, a warranty profile and two parts."""
    ids = SimpleNamespace(
        admin=uuid4(),
        manager=uuid4(),
        technician=uuid4(),
        second_technician=uuid4(),
        inactive_technician=uuid4(),
        receptionist=uuid4(),
        customer=uuid4(),
        miner_model=uuid4(),
        warranty=uuid4(),
        psu=uuid4(),
        fan=uuid4(),
    )

    async with session_factory() as session:
        session.add_all(
            [
                UserModel(id=ids.admin, username="admin", role="admin"),
                UserModel(id=ids.manager, username="mgr", role="manager"),
                UserModel(
                    id=ids.technician,
                    username="tech1",
                    full_name="Ana Tech",
                    role="technician",
                ),
                UserModel(
                    id=ids.second_technician, username="tech2", role="technician"
                ),
                UserModel(
                    id=ids.inactive_technician,
                    username="tech3",
                    role="technician",
                    is_active=False,
                ),
                UserModel(id=ids.receptionist, username="desk", role="receptionist"),
                CustomerModel(id=ids.customer, full_name="Hash Farm Ltd"),
                MinerModelModel(id=ids.miner_model, brand="Bitmain", model_name="S19 Pro"),
                WarrantyProfileModel(id=ids.warranty, name="90 days", duration_days=90),
                PartModel(
                    id=ids.psu,
                    part_number="PSU-APW12",
                    part_name="APW12 power supply",
                    stock_qty=5,
                    min_stock_qty=2,
                    unit_price=Decimal("120.00"),
                ),
                PartModel(
                    id=ids.fan,
                    part_number="FAN-12038",
                    part_name="12038 cooling fan",
                    stock_qty=1,
                    min_stock_qty=3,
                    unit_price=Decimal("15.50"),
                ),
            ]
        )
        await session.commit()

    return SimpleNamespace(
        ids=ids,
        admin=Actor(ids.admin, Role.ADMIN),
        manager=Actor(ids.manager, Role.MANAGER),
        technician=Actor(ids.technician, Role.TECHNICIAN),
        receptionist=Actor(ids.receptionist, Role.RECEPTIONIST),
    )


def build_use_cases(
    session: AsyncSession,
    clock,
    gate: AuthorizationGate = None,
    restore_stock_on_delete: bool = False,
) -> SimpleNamespace:
    """Wire every use case onto one session, the way the API does per request."""
    gate = gate or AuthorizationGate()
    tx = TransactionService(session)
    job_repo = JobRepository(session)
    part_repo = PartRepository(session)
    job_part_repo = JobPartRepository(session)
    directory_repo = DirectoryRepository(session)
    record_repo = JobRecordRepository(session)
    audit_trail = AuditTrail(ActivityLogRepository(session), clock=clock)
    sequencer = JobNumberSequencer(JobNumberSequenceRepository(session), job_repo)
    ledger = PartLedger(part_repo, job_part_repo, audit_trail)

    return SimpleNamespace(
        session=session,
        job_repo=job_repo,
        part_repo=part_repo,
        audit_trail=audit_trail,
        create_job=CreateJobUseCase(
            gate, tx, job_repo, directory_repo, sequencer, audit_trail, clock=clock
        ),
        update_job=UpdateJobUseCase(
            gate, tx, job_repo, directory_repo, audit_trail, clock=clock
        ),
        change_status=ChangeStatusUseCase(gate, tx, job_repo, audit_trail, clock=clock),
        assign_technician=AssignTechnicianUseCase(
            gate, tx, job_repo, directory_repo, audit_trail, clock=clock
        ),
        delete_job=DeleteJobUseCase(
            gate, tx, job_repo, ledger, restore_stock=restore_stock_on_delete
        ),
        withdraw_part=WithdrawPartUseCase(gate, tx, job_repo, ledger),
        return_part=ReturnPartUseCase(gate, tx, job_repo, ledger),
        add_repair_record=AddRepairRecordUseCase(
            gate, tx, job_repo, record_repo, audit_trail, clock=clock
        ),
        attach_images=AttachImagesUseCase(
            gate, tx, job_repo, record_repo, audit_trail, clock=clock
        ),
        delete_image=DeleteImageUseCase(gate, tx, job_repo, record_repo, audit_trail),
        get_job=GetJobUseCase(gate, tx, job_repo, job_part_repo, record_repo),
        list_jobs=ListJobsUseCase(gate, tx, job_repo),
        statistics=JobStatisticsUseCase(gate, tx, job_repo),
        list_activity=ListActivityUseCase(gate, tx, job_repo, audit_trail),
        low_stock=LowStockUseCase(gate, tx, part_repo),
    )


@pytest_asyncio.fixture
async def use_cases(db_session, clock):
    return build_use_cases(db_session, clock)


@pytest_asyncio.fixture
async def job(use_cases, seed):
    """A freshly received job, created through the use case."""
    result = await use_cases.create_job.execute(
        seed.receptionist,
        CreateJobRequest(
            customer_id=seed.ids.customer,
            miner_model_id=seed.ids.miner_model,
            problem_description="Hashboard 1 not detected",
        ),
    )
    return result.unwrap()


@pytest.fixture
def make_use_cases(clock):
    """Factory for use cases bound to a session of the caller's choosing."""

    def factory(session: AsyncSession, **kwargs) -> SimpleNamespace:
        return build_use_cases(session, clock, **kwargs)

    return factory


# Mock fixtures for unit tests


@pytest.fixture
def mock_transaction_service():
    """Transaction service that simply runs the operation."""
    service = AsyncMock(spec=TransactionService)

    async def run(operation):
        return await operation()

    service.execute_in_transaction = AsyncMock(side_effect=run)
    return service


@pytest.fixture
def mock_job_repository():
    """Mock job repository."""
    mock_repo = AsyncMock(spec=JobRepositoryInterface)
    mock_repo.get_by_id = AsyncMock()
    mock_repo.create = AsyncMock(side_effect=lambda job: job)
    mock_repo.update = AsyncMock(side_effect=lambda job: job)
    mock_repo.highest_job_number = AsyncMock(return_value=None)
    mock_repo.count_billing_records = AsyncMock(
        return_value={"quotations": 0, "payments": 0}
    )
    return mock_repo


@pytest.fixture
def mock_directory_repository():
    mock_repo = AsyncMock(spec=DirectoryRepositoryInterface)
    mock_repo.customer_exists = AsyncMock(return_value=True)
    mock_repo.miner_model_exists = AsyncMock(return_value=True)
    mock_repo.warranty_profile_exists = AsyncMock(return_value=True)
    mock_repo.get_user = AsyncMock(return_value=None)
    return mock_repo


@pytest.fixture
def mock_sequence_repository():
    mock_repo = AsyncMock(spec=JobNumberSequenceRepositoryInterface)
    mock_repo.increment = AsyncMock(return_value=7)
    mock_repo.create = AsyncMock(side_effect=lambda prefix, year, last_value: last_value)
    return mock_repo


@pytest.fixture
def mock_activity_repository():
    mock_repo = AsyncMock(spec=ActivityLogRepositoryInterface)
    mock_repo.append = AsyncMock(side_effect=lambda entry: entry)
    return mock_repo


@pytest.fixture
def mock_part_repository():
    return AsyncMock(spec=PartRepositoryInterface)


@pytest.fixture
def mock_job_part_repository():
    mock_repo = AsyncMock(spec=JobPartRepositoryInterface)
    mock_repo.create = AsyncMock(side_effect=lambda job_part: job_part)
    mock_repo.list_by_job = AsyncMock(return_value=[])
    return mock_repo


@pytest.fixture
def mock_record_repository():
    return AsyncMock(spec=JobRecordRepositoryInterface)
