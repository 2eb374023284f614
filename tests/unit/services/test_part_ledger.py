"""
Unit tests for PartLedger.
"""

from decimal import Decimal
from uuid import uuid4

import pytest

from repairshop.application.services.audit_trail import AuditTrail
from repairshop.application.services.part_ledger import PartLedger
from repairshop.domain.entities.job import Job
from repairshop.domain.entities.part import JobPart, Part
from repairshop.domain.entities.user import Actor
from repairshop.domain.exceptions import (
    InsufficientStockError,
    InvalidValueError,
    NotFoundError,
)
from repairshop.domain.value_objects.activity_action import ActivityAction
from repairshop.domain.value_objects.role import Role


class TestPartLedger:
    @pytest.fixture
    def job(self):
        return Job(
            customer_id=uuid4(),
            miner_model_id=uuid4(),
            problem_description="PSU dead",
            created_by_id=uuid4(),
            job_number="RJ2025-0001",
        )

    @pytest.fixture
    def part(self):
        return Part(
            part_number="PSU-APW12",
            part_name="APW12 power supply",
            stock_qty=3,
            min_stock_qty=1,
            unit_price=Decimal("120.00"),
        )

    @pytest.fixture
    def actor(self):
        return Actor(uuid4(), Role.TECHNICIAN)

    @pytest.fixture
    def ledger(
        self,
        mock_part_repository,
        mock_job_part_repository,
        mock_activity_repository,
        clock,
    ):
        audit_trail = AuditTrail(mock_activity_repository, clock=clock)
        return PartLedger(mock_part_repository, mock_job_part_repository, audit_trail)

    @pytest.mark.asyncio
    async def test_withdraw_snapshots_price_and_records_activity(
        self,
        ledger,
        job,
        part,
        actor,
        mock_part_repository,
        mock_job_part_repository,
        mock_activity_repository,
    ):
        mock_part_repository.try_decrement_stock.return_value = True
        mock_part_repository.get_by_id.return_value = part

        job_part = await ledger.withdraw(job, part.id, 2, actor)

        mock_part_repository.try_decrement_stock.assert_awaited_once_with(part.id, 2)
        assert job_part.unit_price == Decimal("120.00")
        assert job_part.total_price == Decimal("240.00")
        assert job_part.part is part

        entry = mock_activity_repository.append.await_args.args[0]
        assert entry.action == ActivityAction.ADD_PART
        assert entry.description == "Withdrew 2 x APW12 power supply (PSU-APW12)"
        assert entry.user_id == actor.user_id

    @pytest.mark.asyncio
    async def test_withdraw_keeps_explicit_price(
        self, ledger, job, part, actor, mock_part_repository
    ):
        mock_part_repository.try_decrement_stock.return_value = True
        mock_part_repository.get_by_id.return_value = part

        job_part = await ledger.withdraw(
            job, part.id, 1, actor, unit_price=Decimal("99.90"), notes="warranty swap"
        )

        assert job_part.unit_price == Decimal("99.90")
        assert job_part.notes == "warranty swap"

    @pytest.mark.asyncio
    async def test_withdraw_insufficient_stock(
        self,
        ledger,
        job,
        part,
        actor,
        mock_part_repository,
        mock_job_part_repository,
        mock_activity_repository,
    ):
        mock_part_repository.try_decrement_stock.return_value = False
        mock_part_repository.get_by_id.return_value = part

        with pytest.raises(InsufficientStockError) as exc_info:
            await ledger.withdraw(job, part.id, 4, actor)

        error = exc_info.value
        assert error.message == (
            "Insufficient stock for part PSU-APW12: only 3 in stock, 4 requested"
        )
        assert error.details["available"] == 3
        assert error.details["requested"] == 4
        mock_job_part_repository.create.assert_not_awaited()
        mock_activity_repository.append.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_withdraw_unknown_part(self, ledger, job, actor, mock_part_repository):
        mock_part_repository.try_decrement_stock.return_value = False
        mock_part_repository.get_by_id.return_value = None

        with pytest.raises(NotFoundError, match="Part"):
            await ledger.withdraw(job, uuid4(), 1, actor)

    @pytest.mark.asyncio
    async def test_withdraw_rejects_zero_quantity(
        self, ledger, job, actor, mock_part_repository
    ):
        with pytest.raises(InvalidValueError):
            await ledger.withdraw(job, uuid4(), 0, actor)
        mock_part_repository.try_decrement_stock.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_return_part_restores_stock(
        self,
        ledger,
        job,
        part,
        actor,
        mock_part_repository,
        mock_job_part_repository,
        mock_activity_repository,
    ):
        job_part = JobPart(
            job_id=job.id, part_id=part.id, quantity=2, unit_price=Decimal("120.00")
        )
        mock_job_part_repository.get_for_job.return_value = job_part
        mock_part_repository.get_by_id.return_value = part

        returned = await ledger.return_part(job, job_part.id, actor)

        assert returned is job_part
        mock_part_repository.increment_stock.assert_awaited_once_with(part.id, 2)
        mock_job_part_repository.delete.assert_awaited_once_with(job_part.id)
        entry = mock_activity_repository.append.await_args.args[0]
        assert entry.action == ActivityAction.REMOVE_PART
        assert entry.description == "Returned 2 x APW12 power supply (PSU-APW12)"

    @pytest.mark.asyncio
    async def test_return_unknown_job_part(
        self, ledger, job, actor, mock_job_part_repository, mock_part_repository
    ):
        mock_job_part_repository.get_for_job.return_value = None

        with pytest.raises(NotFoundError, match="Job part"):
            await ledger.return_part(job, uuid4(), actor)
        mock_part_repository.increment_stock.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_restore_all(
        self, ledger, job, mock_part_repository, mock_job_part_repository
    ):
        first, second = uuid4(), uuid4()
        mock_job_part_repository.list_by_job.return_value = [
            JobPart(job_id=job.id, part_id=first, quantity=2, unit_price=Decimal("1")),
            JobPart(job_id=job.id, part_id=second, quantity=3, unit_price=Decimal("1")),
        ]

        assert await ledger.restore_all(job.id) == 5
        assert mock_part_repository.increment_stock.await_count == 2
        mock_part_repository.increment_stock.assert_any_await(second, 3)
