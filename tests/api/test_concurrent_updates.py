# tests/api/test_concurrent_updates.py
import asyncio

import pytest
from httpx import ASGITransport, AsyncClient

from ihub.database import get_db
from ihub.main import app


@pytest.fixture
def async_app(db_session):
    def override_get_db():
        yield db_session

    app.dependency_overrides[get_db] = override_get_db
    yield app
    app.dependency_overrides.clear()


@pytest.mark.asyncio
async def test_concurrent_updates_under_one_milestone_both_persist(
        async_app, sample_startup, sample_project, sample_milestone, make_deliverable):
    first = make_deliverable(sample_milestone, "First")
    second = make_deliverable(sample_milestone, "Second")
    base = {
        "startupId": sample_startup.id,
        "projectId": sample_project.id,
        "milestoneId": sample_milestone.id,
        "status": "Completed"
    }

    async with AsyncClient(transport=ASGITransport(app=async_app), base_url="http://test") as client:
        responses = await asyncio.gather(
            client.post("/api/startups/progress", json={**base, "deliverableId": first.id}),
            client.post("/api/startups/progress", json={**base, "deliverableId": second.id}),
        )
        assert [r.status_code for r in responses] == [200, 200]

        listed = (await client.get("/api/startups/progress")).json()

    # Each update wrote its own deliverable record, so neither one is lost
    assert listed[0]["projects"][0]["progress"] == {"total": 2, "completed": 2, "percentage": 100}
