"""
Integration tests for searching and reading back jobs.
"""

from uuid import uuid4

import pytest
import pytest_asyncio

from repairshop.application.use_cases import (
    AddRepairRecordRequest,
    CreateJobRequest,
    ImageUpload,
)
from repairshop.domain.value_objects.job_status import JobStatus
from repairshop.infrastructure.database.models import CustomerModel

pytestmark = pytest.mark.integration


@pytest_asyncio.fixture
async def jobs(use_cases, seed, clock):
    """Three jobs five minutes apart; the last one for a second customer."""
    other_customer = uuid4()
    use_cases.session.add(
        CustomerModel(id=other_customer, full_name="Joao Pereira", phone="+55 21 98888-7777")
    )
    await use_cases.session.commit()

    requests = [
        CreateJobRequest(
            customer_id=seed.ids.customer,
            miner_model_id=seed.ids.miner_model,
            problem_description="Hashboard 2 missing",
            serial_number="SN-S19-555",
        ),
        CreateJobRequest(
            customer_id=seed.ids.customer,
            miner_model_id=seed.ids.miner_model,
            problem_description="Overheating at 40C ambient",
            priority=2,
        ),
        CreateJobRequest(
            customer_id=other_customer,
            miner_model_id=seed.ids.miner_model,
            problem_description="Fan error 12038",
        ),
    ]
    created = []
    for request in requests:
        clock.advance(minutes=5)
        result = await use_cases.create_job.execute(seed.receptionist, request)
        created.append(result.unwrap())
    return created


async def numbers(use_cases, actor, **kwargs):
    page = (await use_cases.list_jobs.execute(actor, **kwargs)).unwrap()
    return [job.job_number for job in page.items]


class TestJobListing:
    @pytest.mark.asyncio
    async def test_newest_first_with_paging(self, use_cases, seed, jobs):
        first = (await use_cases.list_jobs.execute(seed.technician, limit=2)).unwrap()
        rest = (await use_cases.list_jobs.execute(seed.technician, limit=2, offset=2)).unwrap()

        assert [job.job_number for job in first.items] == ["RJ2025-0003", "RJ2025-0002"]
        assert first.total == 3
        assert first.has_next is True
        assert [job.job_number for job in rest.items] == ["RJ2025-0001"]
        assert rest.has_next is False

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "text, expected",
        [
            ("rj2025-0002", ["RJ2025-0002"]),
            ("sn-s19", ["RJ2025-0001"]),
            ("HASH FARM", ["RJ2025-0002", "RJ2025-0001"]),
            ("98888", ["RJ2025-0003"]),
            ("100%", []),
        ],
    )
    async def test_search(self, use_cases, seed, jobs, text, expected):
        assert await numbers(use_cases, seed.receptionist, search=text) == expected

    @pytest.mark.asyncio
    async def test_filters(self, use_cases, seed, jobs):
        await use_cases.change_status.execute(seed.manager, jobs[0].id, "IN_REPAIR")
        await use_cases.assign_technician.execute(
            seed.manager, jobs[2].id, seed.ids.technician
        )

        assert await numbers(use_cases, seed.manager, status="IN_REPAIR") == ["RJ2025-0001"]
        assert await numbers(use_cases, seed.manager, status=JobStatus.RECEIVED) == [
            "RJ2025-0003",
            "RJ2025-0002",
        ]
        assert await numbers(
            use_cases, seed.manager, technician_id=seed.ids.technician
        ) == ["RJ2025-0003"]
        assert await numbers(use_cases, seed.manager, priority=2) == ["RJ2025-0002"]
        assert await numbers(
            use_cases, seed.manager, search="hash farm", status="RECEIVED"
        ) == ["RJ2025-0002"]

    @pytest.mark.asyncio
    async def test_limit_out_of_range(self, use_cases, seed, jobs):
        result = await use_cases.list_jobs.execute(seed.manager, limit=1000)

        assert result.error_kind == "validation_error"


class TestJobDetailsReadBack:
    @pytest.mark.asyncio
    async def test_details_include_records_and_images(self, use_cases, seed, job, clock):
        await use_cases.add_repair_record.execute(
            seed.technician,
            job.id,
            AddRepairRecordRequest(description="Diagnosed shorted chip 14"),
        )
        clock.advance(hours=2)
        await use_cases.add_repair_record.execute(
            seed.technician,
            job.id,
            AddRepairRecordRequest(description="Replaced chip 14", actions="Reballed"),
        )
        attached = (
            await use_cases.attach_images.execute(
                seed.technician,
                job.id,
                [ImageUpload("https://files.example/a.jpg", "before")],
                image_type="before",
            )
        ).unwrap()

        details = (await use_cases.get_job.execute(seed.receptionist, job.id)).unwrap()

        assert [r.description for r in details.repair_records] == [
            "Replaced chip 14",
            "Diagnosed shorted chip 14",
        ]
        assert details.repair_records[0].actions == "Reballed"
        assert [image.id for image in details.images] == [attached[0].id]
        assert details.images[0].image_type == "BEFORE"

    @pytest.mark.asyncio
    async def test_deleted_image_no_longer_listed(self, use_cases, seed, job):
        attached = (
            await use_cases.attach_images.execute(
                seed.technician,
                job.id,
                [
                    ImageUpload("https://files.example/1.jpg"),
                    ImageUpload("https://files.example/2.jpg"),
                ],
            )
        ).unwrap()

        await use_cases.delete_image.execute(seed.technician, job.id, attached[0].id)
        details = (await use_cases.get_job.execute(seed.technician, job.id)).unwrap()

        assert [image.id for image in details.images] == [attached[1].id]
        assert details.repair_records == []
