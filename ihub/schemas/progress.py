# ihub/schemas/progress.py
"""Containment graph views.

One request works on owned copies of the stored records:
``StartupView -> ProjectView -> MilestoneView -> DeliverableView``. The
reference id lists on the stored rows are resolved into these nested lists
by ``ihub.services.graph`` and never written back.
"""
from datetime import datetime
from typing import List, Optional

from .base import BaseSchema, TimestampMixin
from ..models.deliverable import DeliverableStatus


class Progress(BaseSchema):
    total: int = 0
    completed: int = 0
    percentage: int = 0


class DeliverableView(BaseSchema, TimestampMixin):
    id: str
    name: str
    status: DeliverableStatus
    notes: Optional[str] = None


class MilestoneView(BaseSchema, TimestampMixin):
    id: str
    name: str
    due_date: Optional[datetime] = None
    deliverables: List[DeliverableView] = []
    progress: Optional[Progress] = None


class ProjectView(BaseSchema, TimestampMixin):
    id: str
    name: str
    description: Optional[str] = None
    milestones: List[MilestoneView] = []
    progress: Optional[Progress] = None


class StartupView(BaseSchema, TimestampMixin):
    id: str
    name: str
    description: Optional[str] = None
    projects: List[ProjectView] = []
    # Combined total/completed over every project's deliverables
    progress: Optional[Progress] = None


class CoordinateStatusUpdate(BaseSchema):
    """Status change addressed by the full startup/project/milestone/deliverable path"""
    startup_id: str
    project_id: str
    milestone_id: str
    deliverable_id: str
    status: DeliverableStatus
