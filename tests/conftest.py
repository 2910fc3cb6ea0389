# tests/conftest.py
import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from ihub.main import app
from ihub.database import Base, get_db
from ihub.models import Startup, Project, Milestone, Deliverable, DeliverableStatus
from ihub.config import settings

SQLALCHEMY_TEST_DATABASE_URL = "sqlite:///:memory:"


@pytest.fixture
def engine():
    """Fresh in-memory database per test"""
    engine = create_engine(
        SQLALCHEMY_TEST_DATABASE_URL,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool  # Needed for SQLite in-memory database
    )
    Base.metadata.create_all(engine)
    yield engine
    Base.metadata.drop_all(engine)
    engine.dispose()


@pytest.fixture
def db_session(engine):
    session = sessionmaker(bind=engine, autoflush=False)()
    yield session
    session.close()


@pytest.fixture(autouse=True)
def override_settings():
    """Keep the app's own store in memory while tests run"""
    original_url = settings.DATABASE_URL
    settings.DATABASE_URL = SQLALCHEMY_TEST_DATABASE_URL
    yield
    settings.DATABASE_URL = original_url


@pytest.fixture
def client(db_session):
    """Test client using the test database"""
    def override_get_db():
        try:
            yield db_session
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


def attach(db_session, parent, ref_field, child):
    """Persist child and append it to the parent's reference list"""
    db_session.add(child)
    db_session.commit()
    getattr(parent, ref_field).append(child.id)
    db_session.commit()
    db_session.refresh(child)
    return child


@pytest.fixture
def sample_startup(db_session):
    startup = Startup(name="Acme Robotics", description="Warehouse automation", project_ids=[])
    db_session.add(startup)
    db_session.commit()
    db_session.refresh(startup)
    return startup


@pytest.fixture
def sample_project(db_session, sample_startup):
    project = Project(name="MVP", description="First release", milestone_ids=[])
    return attach(db_session, sample_startup, "project_ids", project)


@pytest.fixture
def sample_milestone(db_session, sample_project):
    milestone = Milestone(name="Prototype", deliverable_ids=[])
    return attach(db_session, sample_project, "milestone_ids", milestone)


@pytest.fixture
def sample_deliverable(db_session, sample_milestone):
    deliverable = Deliverable(name="Wireframes", status=DeliverableStatus.NOT_STARTED)
    return attach(db_session, sample_milestone, "deliverable_ids", deliverable)


@pytest.fixture
def make_deliverable(db_session):
    """Factory adding a deliverable with a given status under a milestone"""
    def _make(milestone, name, status=DeliverableStatus.NOT_STARTED):
        return attach(
            db_session, milestone, "deliverable_ids", Deliverable(name=name, status=status)
        )
    return _make


@pytest.fixture
def make_milestone(db_session):
    def _make(project, name):
        return attach(
            db_session, project, "milestone_ids", Milestone(name=name, deliverable_ids=[])
        )
    return _make
