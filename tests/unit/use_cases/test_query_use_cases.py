"""
Unit tests for the job lookup and search use cases.
"""

from unittest.mock import AsyncMock
from uuid import uuid4

import pytest

from repairshop.application.services.authorization_gate import AuthorizationGate
from repairshop.application.use_cases import GetJobUseCase, ListJobsUseCase
from repairshop.domain.entities.job import Job
from repairshop.domain.entities.job_records import JobImage, RepairRecord
from repairshop.domain.entities.user import Actor
from repairshop.domain.value_objects.job_priority import JobPriority
from repairshop.domain.value_objects.job_status import JobStatus
from repairshop.domain.value_objects.role import Role


@pytest.fixture
def receptionist():
    return Actor(uuid4(), Role.RECEPTIONIST)


@pytest.fixture
def sample_job():
    return Job(
        customer_id=uuid4(),
        miner_model_id=uuid4(),
        problem_description="PSU clicks on power-up",
        created_by_id=uuid4(),
        job_number="RJ2025-0003",
    )


class TestListJobsUseCase:
    @pytest.fixture
    def use_case(self, mock_transaction_service, mock_job_repository):
        return ListJobsUseCase(
            AuthorizationGate(), mock_transaction_service, mock_job_repository, max_limit=50
        )

    @pytest.mark.asyncio
    async def test_filters_are_parsed_and_passed_through(
        self, use_case, receptionist, mock_job_repository, sample_job
    ):
        technician_id = uuid4()
        mock_job_repository.search = AsyncMock(return_value=([sample_job], 7))

        result = await use_case.execute(
            receptionist,
            search="  hash farm ",
            status="IN_REPAIR",
            technician_id=technician_id,
            priority=2,
            limit=1,
            offset=3,
        )

        page = result.unwrap()
        assert page.items == [sample_job]
        assert page.total == 7
        assert page.has_next is True
        mock_job_repository.search.assert_awaited_once_with(
            text="hash farm",
            status=JobStatus.IN_REPAIR,
            technician_id=technician_id,
            priority=JobPriority.CRITICAL,
            limit=1,
            offset=3,
        )

    @pytest.mark.asyncio
    async def test_blank_search_means_no_text_filter(
        self, use_case, receptionist, mock_job_repository
    ):
        mock_job_repository.search = AsyncMock(return_value=([], 0))

        result = await use_case.execute(receptionist, search="   ")

        assert result.ok
        assert result.value.has_next is False
        kwargs = mock_job_repository.search.await_args.kwargs
        assert kwargs["text"] is None
        assert kwargs["limit"] == 20

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "kwargs",
        [
            {"limit": 0},
            {"limit": 51},
            {"offset": -1},
            {"status": "SHIPPED"},
            {"priority": 3},
        ],
    )
    async def test_invalid_query_rejected(
        self, use_case, receptionist, kwargs, mock_job_repository, mock_transaction_service
    ):
        result = await use_case.execute(receptionist, **kwargs)

        assert result.error_kind == "validation_error"
        mock_transaction_service.execute_in_transaction.assert_not_awaited()
        mock_job_repository.search.assert_not_awaited()


class TestGetJobUseCase:
    @pytest.mark.asyncio
    async def test_details_include_records_and_images(
        self,
        receptionist,
        sample_job,
        mock_transaction_service,
        mock_job_repository,
        mock_job_part_repository,
        mock_record_repository,
    ):
        record = RepairRecord(
            job_id=sample_job.id, description="Reflowed chip 14", created_by=uuid4()
        )
        image = JobImage(job_id=sample_job.id, image_url="https://files.example/1.jpg")
        mock_job_repository.get_by_id.return_value = sample_job
        mock_record_repository.list_repair_records.return_value = [record]
        mock_record_repository.list_images.return_value = [image]
        use_case = GetJobUseCase(
            AuthorizationGate(),
            mock_transaction_service,
            mock_job_repository,
            mock_job_part_repository,
            mock_record_repository,
        )

        details = (await use_case.execute(receptionist, sample_job.id)).unwrap()

        assert details.job is sample_job
        assert details.parts == []
        assert details.repair_records == [record]
        assert details.images == [image]
        mock_record_repository.list_images.assert_awaited_once_with(sample_job.id)

    @pytest.mark.asyncio
    async def test_unknown_job(
        self,
        receptionist,
        mock_transaction_service,
        mock_job_repository,
        mock_job_part_repository,
        mock_record_repository,
    ):
        mock_job_repository.get_by_id.return_value = None
        use_case = GetJobUseCase(
            AuthorizationGate(),
            mock_transaction_service,
            mock_job_repository,
            mock_job_part_repository,
            mock_record_repository,
        )

        result = await use_case.execute(receptionist, uuid4())

        assert result.error_kind == "not_found"
        mock_record_repository.list_repair_records.assert_not_awaited()
