# ihub/schemas/milestone.py
from datetime import datetime
from typing import List, Optional
from pydantic import Field
from .base import BaseSchema, TimestampMixin

class MilestoneBase(BaseSchema):
    name: str = Field(min_length=1)
    due_date: Optional[datetime] = None

class MilestoneCreate(MilestoneBase):
    project_id: str

class Milestone(MilestoneBase, TimestampMixin):
    id: str
    deliverable_ids: List[str] = []
