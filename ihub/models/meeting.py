# ihub/models/meeting.py
from sqlalchemy import Column, String, Text, DateTime
from sqlalchemy.sql import func
from ..database import Base, new_id, utcnow

class Meeting(Base):
    __tablename__ = "meetings"

    id = Column(String(36), primary_key=True, default=new_id)
    startup_name = Column(String(255), nullable=False)
    department_name = Column(String(255), nullable=False, index=True)
    meeting_date = Column(DateTime(timezone=True), nullable=False)
    attendees = Column(Text, nullable=True)
    notes = Column(Text, nullable=False)
    created_at = Column(DateTime(timezone=True), default=utcnow, server_default=func.now())
    updated_at = Column(DateTime(timezone=True), default=utcnow, server_default=func.now(), onupdate=utcnow)
