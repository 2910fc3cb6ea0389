# tests/api/test_dashboard.py
from fastapi import status

from ihub.models import DeliverableStatus


def test_department_detail(client):
    client.post("/api/meetings", json={
        "startupName": "Acme Robotics", "departmentName": "Legal",
        "meetingDate": "2026-01-01T09:00:00", "notes": "Kickoff"
    })
    client.post("/api/meetings", json={
        "startupName": "Acme Robotics", "departmentName": "Tech",
        "meetingDate": "2026-01-02T09:00:00", "notes": "Architecture"
    })
    client.post("/api/resources", json={
        "name": "NDA", "url": "https://example.com/nda", "department": "Legal"
    })

    response = client.get("/api/departments/Legal")

    assert response.status_code == status.HTTP_200_OK
    data = response.json()
    assert data["departmentName"] == "Legal"
    assert [m["notes"] for m in data["meetings"]] == ["Kickoff"]
    assert [r["name"] for r in data["resources"]] == ["NDA"]


def test_department_without_records(client):
    response = client.get("/api/departments/Finance")

    assert response.status_code == status.HTTP_200_OK
    assert response.json() == {"departmentName": "Finance", "meetings": [], "resources": []}


def test_department_blank_name(client):
    response = client.get("/api/departments/%20")

    assert response.status_code == status.HTTP_400_BAD_REQUEST
    assert response.json() == {"message": "Department name is required."}


def test_department_missing_name(client):
    response = client.get("/api/departments/")
    assert response.status_code == status.HTTP_400_BAD_REQUEST


def test_dashboard_stats(client, sample_project, sample_milestone, make_milestone, make_deliverable):
    for day in (1, 2, 3):
        client.post("/api/meetings", json={
            "startupName": "Acme Robotics", "departmentName": "Legal",
            "meetingDate": f"2026-01-0{day}T09:00:00", "notes": "Sync"
        })

    make_deliverable(sample_milestone, "A", DeliverableStatus.COMPLETED)
    make_deliverable(sample_milestone, "B", DeliverableStatus.IN_PROGRESS)
    make_deliverable(sample_milestone, "C")
    make_deliverable(sample_milestone, "D")
    launch = make_milestone(sample_project, "Launch")
    make_deliverable(launch, "E", DeliverableStatus.COMPLETED)

    response = client.get("/api/dashboard-stats")

    assert response.status_code == status.HTTP_200_OK
    assert response.json() == {
        "totalMeetings": 3,
        "totalCompletedDeliverables": 2,
        "totalCompletedMilestones": 1
    }


def test_dashboard_stats_empty(client, sample_milestone):
    response = client.get("/api/dashboard-stats")

    assert response.status_code == status.HTTP_200_OK
    # A milestone with no deliverables is not complete
    assert response.json() == {
        "totalMeetings": 0,
        "totalCompletedDeliverables": 0,
        "totalCompletedMilestones": 0
    }
