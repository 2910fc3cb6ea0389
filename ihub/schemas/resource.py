# ihub/schemas/resource.py
from typing import Optional
from pydantic import Field
from .base import BaseSchema, TimestampMixin

class ResourceBase(BaseSchema):
    name: str = Field(min_length=1)
    description: Optional[str] = None
    url: str = Field(min_length=1)
    department: Optional[str] = None

class ResourceCreate(ResourceBase):
    pass

class Resource(ResourceBase, TimestampMixin):
    id: str
