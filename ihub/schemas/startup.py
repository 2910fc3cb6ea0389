# ihub/schemas/startup.py
from typing import List, Optional
from pydantic import Field
from .base import BaseSchema, TimestampMixin

class StartupBase(BaseSchema):
    name: str = Field(min_length=1)
    description: Optional[str] = None

class StartupCreate(StartupBase):
    pass

class Startup(StartupBase, TimestampMixin):
    id: str
    project_ids: List[str] = []
