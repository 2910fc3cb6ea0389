# ihub/api/__init__.py
from .startups import router as startups_router
from .projects import router as projects_router
from .milestones import router as milestones_router
from .deliverables import router as deliverables_router
from .meetings import router as meetings_router
from .resources import router as resources_router
from .departments import router as departments_router
from .dashboard import router as dashboard_router

__all__ = [
    "startups_router", "projects_router", "milestones_router", "deliverables_router",
    "meetings_router", "resources_router", "departments_router", "dashboard_router"
]
