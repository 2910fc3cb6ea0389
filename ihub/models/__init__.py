# ihub/models/__init__.py
from ..database import Base
from .startup import Startup
from .project import Project
from .milestone import Milestone
from .deliverable import Deliverable, DeliverableStatus
from .meeting import Meeting
from .resource import Resource

__all__ = [
    "Base",
    "Startup",
    "Project",
    "Milestone",
    "Deliverable",
    "DeliverableStatus",
    "Meeting",
    "Resource"
]
