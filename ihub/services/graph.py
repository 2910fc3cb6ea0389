# ihub/services/graph.py
"""Containment graph loading.

Parents keep ordered lists of child ids. Expanding a level is one query for
all children of that level; ids that no longer resolve are skipped.
"""
from typing import Dict, Iterable, List

from sqlalchemy.orm import Session

from ..database import is_valid_identifier
from ..errors import InvalidIdentifier, NotFound
from ..models import Startup, Project, Milestone, Deliverable
from ..schemas.progress import DeliverableView, MilestoneView, ProjectView, StartupView
from ..utils.logging import service_logger
from .progress import attach_progress, milestone_progress, project_progress, startup_rollup


def get_record(db: Session, model, record_id, kind: str):
    """Fetch one record by id or raise InvalidIdentifier / NotFound"""
    if not is_valid_identifier(record_id):
        raise InvalidIdentifier(kind.lower(), record_id)

    record = db.get(model, record_id)
    if record is None:
        raise NotFound(kind)
    return record


def _fetch_by_ids(db: Session, model, ids: Iterable[str]) -> Dict[str, object]:
    wanted = {i for i in ids if is_valid_identifier(i)}
    if not wanted:
        return {}
    rows = db.query(model).filter(model.id.in_(wanted)).all()
    return {row.id: row for row in rows}


def _resolve(ids, records: Dict[str, object], kind: str, parent_id: str) -> List:
    resolved = []
    for child_id in ids or []:
        record = records.get(child_id)
        if record is None:
            service_logger.warning("Skipping dangling reference", extra={
                "kind": kind,
                "child_id": child_id,
                "parent_id": parent_id
            })
            continue
        resolved.append(record)
    return resolved


def expand_milestones(db: Session, milestones) -> List[MilestoneView]:
    deliverables = _fetch_by_ids(
        db, Deliverable, (i for m in milestones for i in (m.deliverable_ids or []))
    )

    views = []
    for milestone in milestones:
        view = MilestoneView.model_validate(milestone)
        view.deliverables = [
            DeliverableView.model_validate(d)
            for d in _resolve(milestone.deliverable_ids, deliverables, "deliverable", milestone.id)
        ]
        view.progress = milestone_progress(view)
        views.append(view)
    return views


def expand_projects(db: Session, projects) -> List[ProjectView]:
    milestones = _fetch_by_ids(
        db, Milestone, (i for p in projects for i in (p.milestone_ids or []))
    )
    milestone_views = {
        view.id: view for view in expand_milestones(db, list(milestones.values()))
    }

    views = []
    for project in projects:
        view = ProjectView.model_validate(project)
        # Copy per project so two parents never share one view object
        view.milestones = [
            milestone_views[m.id].model_copy(deep=True)
            for m in _resolve(project.milestone_ids, milestones, "milestone", project.id)
        ]
        views.append(view)
    return views


def expand_startups(db: Session, startups) -> List[StartupView]:
    projects = _fetch_by_ids(
        db, Project, (i for s in startups for i in (s.project_ids or []))
    )
    project_views = {
        view.id: view for view in expand_projects(db, list(projects.values()))
    }

    views = []
    for startup in startups:
        view = StartupView.model_validate(startup)
        view.projects = [
            project_views[p.id].model_copy(deep=True)
            for p in _resolve(startup.project_ids, projects, "project", startup.id)
        ]
        views.append(view)
    return views


def with_progress(startup: StartupView) -> StartupView:
    attach_progress(startup)
    startup.progress = startup_rollup(startup)
    return startup


def load_all_startup_graphs(db: Session) -> List[StartupView]:
    startups = db.query(Startup).order_by(Startup.created_at).all()
    service_logger.debug("Expanding startups", extra={"startup_count": len(startups)})
    return [with_progress(view) for view in expand_startups(db, startups)]


def load_startup_graph(db: Session, startup_id: str) -> StartupView:
    startup = get_record(db, Startup, startup_id, "Startup")
    return with_progress(expand_startups(db, [startup])[0])


def load_project_graph(db: Session, project_id: str) -> ProjectView:
    project = get_record(db, Project, project_id, "Project")
    view = expand_projects(db, [project])[0]
    view.progress = project_progress(view)
    return view
