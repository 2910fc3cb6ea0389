# tests/services/test_hierarchy.py
import pytest
from sqlalchemy.exc import OperationalError

from ihub.errors import StoreError
from ihub.models import Project, Milestone
from ihub.services import hierarchy
from ihub.services.hierarchy import create_and_attach


def test_create_and_attach_appends_in_order(db_session, sample_project):
    first = create_and_attach(db_session, sample_project, "milestone_ids",
                              Milestone(name="One", deliverable_ids=[]), "Milestone")
    second = create_and_attach(db_session, sample_project, "milestone_ids",
                               Milestone(name="Two", deliverable_ids=[]), "Milestone")

    db_session.expire_all()
    assert db_session.get(Project, sample_project.id).milestone_ids == [first.id, second.id]


def test_attach_failure_leaves_orphaned_child(db_session, sample_project, monkeypatch):
    def failing_attach(db, parent, ref_field, child_id):
        raise OperationalError("UPDATE projects", {}, Exception("disk I/O error"))

    monkeypatch.setattr(hierarchy, "attach_child", failing_attach)

    with pytest.raises(StoreError):
        create_and_attach(db_session, sample_project, "milestone_ids",
                          Milestone(name="Lost", deliverable_ids=[]), "Milestone")

    # The child exists on its own but its parent never learned about it
    orphan = db_session.query(Milestone).filter(Milestone.name == "Lost").one()
    assert orphan.id not in db_session.get(Project, sample_project.id).milestone_ids
