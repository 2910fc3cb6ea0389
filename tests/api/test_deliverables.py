# tests/api/test_deliverables.py
import uuid

from fastapi import status

from ihub.models import Milestone


def test_create_deliverable_defaults_to_not_started(client, db_session, sample_milestone):
    response = client.post(
        "/api/deliverables",
        json={"name": "Pitch deck", "milestoneId": sample_milestone.id}
    )

    assert response.status_code == status.HTTP_201_CREATED
    data = response.json()
    assert data["status"] == "Not Started"

    db_session.expire_all()
    assert db_session.get(Milestone, sample_milestone.id).deliverable_ids == [data["id"]]


def test_create_deliverable_with_status(client, sample_milestone):
    response = client.post(
        "/api/deliverables",
        json={"name": "Pitch deck", "status": "In Progress", "notes": "v2", "milestoneId": sample_milestone.id}
    )

    assert response.status_code == status.HTTP_201_CREATED
    assert response.json()["status"] == "In Progress"
    assert response.json()["notes"] == "v2"


def test_create_deliverable_rejects_unknown_status(client, sample_milestone):
    response = client.post(
        "/api/deliverables",
        json={"name": "Pitch deck", "status": "Blocked", "milestoneId": sample_milestone.id}
    )
    assert response.status_code == status.HTTP_400_BAD_REQUEST


def test_create_deliverable_unknown_milestone(client):
    response = client.post(
        "/api/deliverables",
        json={"name": "Pitch deck", "milestoneId": str(uuid.uuid4())}
    )
    assert response.status_code == status.HTTP_404_NOT_FOUND


def test_create_deliverable_invalid_milestone_id(client):
    response = client.post("/api/deliverables", json={"name": "Pitch deck", "milestoneId": "1"})
    assert response.status_code == status.HTTP_400_BAD_REQUEST


def test_patch_deliverable(client, sample_deliverable):
    response = client.patch(
        f"/api/deliverables/{sample_deliverable.id}",
        json={"status": "In Progress", "notes": "Started drafting"}
    )

    assert response.status_code == status.HTTP_200_OK
    data = response.json()
    assert data["status"] == "In Progress"
    assert data["notes"] == "Started drafting"
    assert data["name"] == "Wireframes"


def test_patch_deliverable_null_fields_are_ignored(client, sample_deliverable):
    response = client.patch(
        f"/api/deliverables/{sample_deliverable.id}",
        json={"name": None, "status": "Completed"}
    )

    assert response.status_code == status.HTTP_200_OK
    assert response.json()["name"] == "Wireframes"


def test_patch_deliverable_not_found(client):
    response = client.patch(f"/api/deliverables/{uuid.uuid4()}", json={"status": "Completed"})

    assert response.status_code == status.HTTP_404_NOT_FOUND
    assert response.json() == {"message": "Deliverable not found"}


def test_patch_deliverable_invalid_status(client, sample_deliverable):
    response = client.patch(f"/api/deliverables/{sample_deliverable.id}", json={"status": "done"})
    assert response.status_code == status.HTTP_400_BAD_REQUEST


def test_full_hierarchy_round_trip(client):
    startup = client.post("/api/startups", json={"name": "Round Trip Inc"}).json()
    project = client.post("/api/projects", json={"name": "Core", "startupId": startup["id"]}).json()
    milestone = client.post("/api/milestones", json={"name": "M1", "projectId": project["id"]}).json()
    deliverable = client.post(
        "/api/deliverables", json={"name": "D1", "milestoneId": milestone["id"]}
    ).json()

    listed = client.get("/api/startups/progress").json()
    listed_project = listed[0]["projects"][0]
    assert listed_project["id"] == project["id"]
    assert listed_project["progress"] == {"total": 1, "completed": 0, "percentage": 0}

    patched = client.patch(f"/api/deliverables/{deliverable['id']}", json={"status": "Completed"})
    assert patched.status_code == status.HTTP_200_OK

    listed = client.get("/api/startups/progress").json()
    assert listed[0]["projects"][0]["progress"] == {"total": 1, "completed": 1, "percentage": 100}
