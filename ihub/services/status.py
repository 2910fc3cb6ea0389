# ihub/services/status.py
"""Deliverable updates.

Deliverables are independent records; milestones only hold their ids. Both
update paths (direct by id, and by startup/project/milestone/deliverable
coordinate) end in ``apply_deliverable_changes`` on the Deliverable row, so a
status change is a single-record write either way.
"""
from typing import Any, Dict

from sqlalchemy.orm import Session

from ..errors import NotFound
from ..models import Startup, Project, Milestone, Deliverable
from ..schemas.deliverable import DeliverableUpdate
from ..schemas.progress import CoordinateStatusUpdate, ProjectView
from ..utils.logging import service_logger
from .graph import get_record, load_project_graph


def apply_deliverable_changes(db: Session, deliverable: Deliverable, changes: Dict[str, Any]) -> Deliverable:
    for field, value in changes.items():
        setattr(deliverable, field, value)
    db.commit()
    db.refresh(deliverable)
    return deliverable


def update_deliverable(db: Session, deliverable_id: str, update: DeliverableUpdate) -> Deliverable:
    deliverable = get_record(db, Deliverable, deliverable_id, "Deliverable")
    changes = update.model_dump(exclude_none=True)

    service_logger.debug("Updating deliverable", extra={
        "deliverable_id": deliverable_id,
        "update_fields": list(changes.keys())
    })
    return apply_deliverable_changes(db, deliverable, changes)


def update_status_by_coordinate(db: Session, update: CoordinateStatusUpdate) -> ProjectView:
    # Existence checks only; neither subtree is used afterwards
    get_record(db, Startup, update.startup_id, "Startup")
    get_record(db, Project, update.project_id, "Project")

    milestone = get_record(db, Milestone, update.milestone_id, "Milestone")
    if update.deliverable_id not in (milestone.deliverable_ids or []):
        raise NotFound("Deliverable")

    deliverable = get_record(db, Deliverable, update.deliverable_id, "Deliverable")
    previous = deliverable.status
    apply_deliverable_changes(db, deliverable, {"status": update.status})

    service_logger.info("Deliverable status changed", extra={
        "milestone_id": milestone.id,
        "deliverable_id": deliverable.id,
        "previous_status": previous.value if previous else None,
        "new_status": update.status.value
    })
    return load_project_graph(db, update.project_id)
