# ihub/schemas/__init__.py
from .startup import Startup, StartupCreate
from .project import Project, ProjectCreate
from .milestone import Milestone, MilestoneCreate
from .deliverable import Deliverable, DeliverableCreate, DeliverableUpdate
from .meeting import Meeting, MeetingCreate
from .resource import Resource, ResourceCreate
from .progress import (
    Progress, DeliverableView, MilestoneView, ProjectView, StartupView, CoordinateStatusUpdate
)
from .dashboard import DashboardStats, DepartmentDetail

__all__ = [
    "Startup", "StartupCreate",
    "Project", "ProjectCreate",
    "Milestone", "MilestoneCreate",
    "Deliverable", "DeliverableCreate", "DeliverableUpdate",
    "Meeting", "MeetingCreate",
    "Resource", "ResourceCreate",
    "Progress", "DeliverableView", "MilestoneView", "ProjectView", "StartupView",
    "CoordinateStatusUpdate",
    "DashboardStats", "DepartmentDetail"
]
