"""
HTTP tests for the job API, running the app in-process against SQLite.
"""

from decimal import Decimal
from uuid import uuid4

import httpx
import pytest
import pytest_asyncio

from repairshop.api.app import create_app
from repairshop.api.dependencies import get_clock
from repairshop.config.database import get_db_session

pytestmark = pytest.mark.integration

API = "/api/v1"


def headers_for(actor):
    return {"X-User-Id": str(actor.user_id), "X-User-Role": actor.role.value}


@pytest_asyncio.fixture
async def client(session_factory, clock, seed):
    """Create test client with database and clock overrides."""
    app = create_app()

    async def override_db_session():
        async with session_factory() as session:
            yield session

    app.dependency_overrides[get_db_session] = override_db_session
    app.dependency_overrides[get_clock] = lambda: clock

    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://test") as client:
        yield client


@pytest.fixture
def job_payload(seed):
    return {
        "customer_id": str(seed.ids.customer),
        "miner_model_id": str(seed.ids.miner_model),
        "problem_description": "  Unit reboots every 10 minutes  ",
        "priority": 1,
    }


async def create_job(client, seed, payload):
    response = await client.post(
        f"{API}/jobs", json=payload, headers=headers_for(seed.receptionist)
    )
    assert response.status_code == 201, response.text
    return response.json()


class TestJobsApi:
    @pytest.mark.asyncio
    async def test_missing_identity_is_unauthorized(self, client, job_payload):
        response = await client.post(f"{API}/jobs", json=job_payload)

        assert response.status_code == 401
        assert response.json()["error"] == "unauthorized"

    @pytest.mark.asyncio
    async def test_unknown_role_is_unauthorized(self, client, job_payload):
        response = await client.post(
            f"{API}/jobs",
            json=job_payload,
            headers={"X-User-Id": str(uuid4()), "X-User-Role": "owner"},
        )

        assert response.status_code == 401

    @pytest.mark.asyncio
    async def test_create_job(self, client, seed, job_payload):
        body = await create_job(client, seed, job_payload)

        assert body["job_number"] == "RJ2025-0001"
        assert body["status"] == "RECEIVED"
        assert body["priority"] == 1
        assert body["problem_description"] == "Unit reboots every 10 minutes"
        assert body["created_by_id"] == str(seed.ids.receptionist)
        assert body["completed_date"] is None

    @pytest.mark.asyncio
    async def test_list_jobs(self, client, seed, job_payload):
        await create_job(client, seed, job_payload)
        job_payload["serial_number"] = "SN-M30-0042"
        second = await create_job(client, seed, job_payload)
        desk = headers_for(seed.receptionist)

        listed = await client.get(f"{API}/jobs", headers=desk)
        searched = await client.get(
            f"{API}/jobs", params={"search": "m30", "status": "RECEIVED"}, headers=desk
        )
        invalid = await client.get(f"{API}/jobs", params={"status": "SHIPPED"}, headers=desk)

        assert listed.status_code == 200
        page = listed.json()
        assert page["total"] == 2
        assert page["limit"] == 20
        assert {item["job_number"] for item in page["items"]} == {
            "RJ2025-0001",
            "RJ2025-0002",
        }
        assert [item["id"] for item in searched.json()["items"]] == [second["id"]]
        assert invalid.status_code == 400

    @pytest.mark.asyncio
    async def test_job_details_list_records_and_images(self, client, seed, job_payload):
        job = await create_job(client, seed, job_payload)
        tech = headers_for(seed.technician)

        await client.post(
            f"{API}/jobs/{job['id']}/records",
            json={"description": "PSU output ripple out of spec"},
            headers=tech,
        )
        attached = await client.post(
            f"{API}/jobs/{job['id']}/images",
            json={"images": [{"image_url": "https://files.example/psu.jpg"}]},
            headers=tech,
        )
        details = (await client.get(f"{API}/jobs/{job['id']}", headers=tech)).json()

        assert [r["description"] for r in details["repair_records"]] == [
            "PSU output ripple out of spec"
        ]
        assert [i["id"] for i in details["images"]] == [attached.json()[0]["id"]]

    @pytest.mark.asyncio
    async def test_technician_cannot_create(self, client, seed, job_payload):
        response = await client.post(
            f"{API}/jobs", json=job_payload, headers=headers_for(seed.technician)
        )

        assert response.status_code == 403
        assert response.json() == {
            "error": "authorization_error",
            "message": "Role 'technician' is not permitted to create job",
            "retryable": False,
            "details": {"role": "technician", "action": "create_job"},
        }

    @pytest.mark.asyncio
    async def test_blank_description_is_bad_request(self, client, seed, job_payload):
        job_payload["problem_description"] = "   "

        response = await client.post(
            f"{API}/jobs", json=job_payload, headers=headers_for(seed.receptionist)
        )

        assert response.status_code == 400
        assert response.json()["error"] == "validation_error"

    @pytest.mark.asyncio
    async def test_unknown_customer_is_bad_request(self, client, seed, job_payload):
        job_payload["customer_id"] = str(uuid4())

        response = await client.post(
            f"{API}/jobs", json=job_payload, headers=headers_for(seed.receptionist)
        )

        assert response.status_code == 400
        assert response.json()["message"].startswith("Customer ")

    @pytest.mark.asyncio
    async def test_parts_and_status_flow(self, client, seed, job_payload):
        job = await create_job(client, seed, job_payload)
        tech = headers_for(seed.technician)

        withdrawn = await client.post(
            f"{API}/jobs/{job['id']}/parts",
            json={"part_id": str(seed.ids.psu), "quantity": 2},
            headers=tech,
        )
        assert withdrawn.status_code == 201
        assert withdrawn.json()["remaining_stock"] == 3
        assert Decimal(str(withdrawn.json()["total_price"])) == Decimal("240.00")

        refused = await client.post(
            f"{API}/jobs/{job['id']}/parts",
            json={"part_id": str(seed.ids.psu), "quantity": 4},
            headers=tech,
        )
        assert refused.status_code == 409
        error = refused.json()
        assert error["error"] == "conflict"
        assert error["details"]["available"] == 3
        assert error["details"]["requested"] == 4

        completed = await client.patch(
            f"{API}/jobs/{job['id']}/status",
            json={"status": "COMPLETED", "note": "burn-in passed"},
            headers=tech,
        )
        assert completed.status_code == 200
        assert completed.json()["completed_date"] is not None

        noop = await client.patch(
            f"{API}/jobs/{job['id']}/status", json={"status": "COMPLETED"}, headers=tech
        )
        assert noop.status_code == 409
        assert noop.json()["message"] == "Job already at that status (COMPLETED)"

        details = await client.get(f"{API}/jobs/{job['id']}", headers=tech)
        assert details.status_code == 200
        assert [p["quantity"] for p in details.json()["parts"]] == [2]

        activity = await client.get(
            f"{API}/jobs/{job['id']}/activity", params={"limit": 2}, headers=tech
        )
        page = activity.json()
        assert page["total"] == 3
        assert page["has_next"] is True
        assert [item["action"] for item in page["items"]] == ["CHANGE_STATUS", "ADD_PART"]

    @pytest.mark.asyncio
    async def test_oversized_quantity_is_bad_request(self, client, seed, job_payload):
        job = await create_job(client, seed, job_payload)

        response = await client.post(
            f"{API}/jobs/{job['id']}/parts",
            json={"part_id": str(seed.ids.psu), "quantity": 10**20},
            headers=headers_for(seed.technician),
        )

        assert response.status_code == 400
        assert response.json()["error"] == "validation_error"

    @pytest.mark.asyncio
    async def test_unknown_status_is_bad_request(self, client, seed, job_payload):
        job = await create_job(client, seed, job_payload)

        response = await client.patch(
            f"{API}/jobs/{job['id']}/status",
            json={"status": "SHIPPED"},
            headers=headers_for(seed.manager),
        )

        assert response.status_code == 400

    @pytest.mark.asyncio
    async def test_update_rejects_status_field(self, client, seed, job_payload):
        job = await create_job(client, seed, job_payload)

        response = await client.patch(
            f"{API}/jobs/{job['id']}",
            json={"status": "COMPLETED"},
            headers=headers_for(seed.manager),
        )

        assert response.status_code == 400

    @pytest.mark.asyncio
    async def test_delete_job(self, client, seed, job_payload):
        job = await create_job(client, seed, job_payload)
        admin = headers_for(seed.admin)

        forbidden = await client.delete(
            f"{API}/jobs/{job['id']}", headers=headers_for(seed.manager)
        )
        deleted = await client.delete(f"{API}/jobs/{job['id']}", headers=admin)
        missing = await client.get(f"{API}/jobs/{job['id']}", headers=admin)

        assert forbidden.status_code == 403
        assert deleted.status_code == 204
        assert missing.status_code == 404
        assert missing.json()["error"] == "not_found"

    @pytest.mark.asyncio
    async def test_statistics_and_low_stock(self, client, seed, job_payload):
        await create_job(client, seed, job_payload)
        desk = headers_for(seed.receptionist)

        stats = await client.get(f"{API}/jobs/stats", headers=desk)
        low = await client.get(f"{API}/parts/low-stock", headers=desk)

        assert stats.status_code == 200
        assert stats.json()["total"] == 1
        assert stats.json()["by_status"]["RECEIVED"] == 1
        assert [part["part_number"] for part in low.json()] == ["FAN-12038"]

    @pytest.mark.asyncio
    async def test_health(self, client):
        live = await client.get(f"{API}/health")
        ready = await client.get(f"{API}/health/ready")

        assert live.json()["status"] == "alive"
        assert ready.status_code == 200
        assert ready.json()["database"]["status"] == "healthy"
