# ihub/models/startup.py
from sqlalchemy import Column, String, Text, DateTime, JSON
from sqlalchemy.ext.mutable import MutableList
from sqlalchemy.sql import func
from ..database import Base, new_id, utcnow

class Startup(Base):
    __tablename__ = "startups"

    id = Column(String(36), primary_key=True, default=new_id)
    name = Column(String(255), nullable=False, unique=True)
    description = Column(Text, nullable=True)
    # Ordered Project ids; the projects themselves are independent records
    project_ids = Column(MutableList.as_mutable(JSON), nullable=False, default=list)
    created_at = Column(DateTime(timezone=True), default=utcnow, server_default=func.now())
    updated_at = Column(DateTime(timezone=True), default=utcnow, server_default=func.now(), onupdate=utcnow)
