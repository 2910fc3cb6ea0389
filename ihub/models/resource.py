# ihub/models/resource.py
from sqlalchemy import Column, String, Text, DateTime
from sqlalchemy.sql import func
from ..database import Base, new_id, utcnow

class Resource(Base):
    __tablename__ = "resources"

    id = Column(String(36), primary_key=True, default=new_id)
    name = Column(String(255), nullable=False)
    description = Column(Text, nullable=True)
    url = Column(String(2048), nullable=False)
    department = Column(String(255), nullable=True, index=True)  # e.g. "Legal", "Marketing", "Tech"
    created_at = Column(DateTime(timezone=True), default=utcnow, server_default=func.now())
    updated_at = Column(DateTime(timezone=True), default=utcnow, server_default=func.now(), onupdate=utcnow)
