# ihub/models/milestone.py
from sqlalchemy import Column, String, DateTime, JSON
from sqlalchemy.ext.mutable import MutableList
from sqlalchemy.sql import func
from ..database import Base, new_id, utcnow

class Milestone(Base):
    __tablename__ = "milestones"

    id = Column(String(36), primary_key=True, default=new_id)
    name = Column(String(255), nullable=False)
    due_date = Column(DateTime(timezone=True), nullable=True)
    deliverable_ids = Column(MutableList.as_mutable(JSON), nullable=False, default=list)
    created_at = Column(DateTime(timezone=True), default=utcnow, server_default=func.now())
    updated_at = Column(DateTime(timezone=True), default=utcnow, server_default=func.now(), onupdate=utcnow)
