# ihub/schemas/meeting.py
from datetime import datetime
from typing import Optional
from pydantic import Field
from .base import BaseSchema, TimestampMixin

class MeetingBase(BaseSchema):
    startup_name: str = Field(min_length=1)
    department_name: str = Field(min_length=1)
    meeting_date: datetime
    attendees: Optional[str] = None
    notes: str = Field(min_length=1)

class MeetingCreate(MeetingBase):
    pass

class Meeting(MeetingBase, TimestampMixin):
    id: str
