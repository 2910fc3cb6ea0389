# ihub/schemas/project.py
from typing import List, Optional
from pydantic import Field
from .base import BaseSchema, TimestampMixin

class ProjectBase(BaseSchema):
    name: str = Field(min_length=1)
    description: Optional[str] = None

class ProjectCreate(ProjectBase):
    startup_id: str

class Project(ProjectBase, TimestampMixin):
    id: str
    milestone_ids: List[str] = []
