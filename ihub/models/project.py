# ihub/models/project.py
from sqlalchemy import Column, String, Text, DateTime, JSON
from sqlalchemy.ext.mutable import MutableList
from sqlalchemy.sql import func
from ..database import Base, new_id, utcnow

class Project(Base):
    __tablename__ = "projects"

    id = Column(String(36), primary_key=True, default=new_id)
    name = Column(String(255), nullable=False)
    description = Column(Text, nullable=True)
    milestone_ids = Column(MutableList.as_mutable(JSON), nullable=False, default=list)
    created_at = Column(DateTime(timezone=True), default=utcnow, server_default=func.now())
    updated_at = Column(DateTime(timezone=True), default=utcnow, server_default=func.now(), onupdate=utcnow)
