# ihub/schemas/deliverable.py
from typing import Optional

from pydantic import Field

from .base import BaseSchema, TimestampMixin
from ..models.deliverable import DeliverableStatus


class DeliverableBase(BaseSchema):
    name: str = Field(min_length=1)
    notes: Optional[str] = None


class DeliverableCreate(DeliverableBase):
    milestone_id: str
    status: Optional[DeliverableStatus] = None


class DeliverableUpdate(BaseSchema):
    # Fields left out (or sent as null) are not touched
    name: Optional[str] = Field(default=None, min_length=1)
    status: Optional[DeliverableStatus] = None
    notes: Optional[str] = None


class Deliverable(DeliverableBase, TimestampMixin):
    id: str
    status: DeliverableStatus
