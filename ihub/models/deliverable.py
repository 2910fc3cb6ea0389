# ihub/models/deliverable.py
import enum

from sqlalchemy import Column, String, Text, DateTime, Enum
from sqlalchemy.sql import func

from ..database import Base, new_id, utcnow


class DeliverableStatus(str, enum.Enum):
    NOT_STARTED = "Not Started"
    IN_PROGRESS = "In Progress"
    COMPLETED = "Completed"


class Deliverable(Base):
    __tablename__ = "deliverables"

    id = Column(String(36), primary_key=True, default=new_id)
    name = Column(String(255), nullable=False)
    status = Column(
        Enum(
            DeliverableStatus,
            name="deliverable_status",
            values_callable=lambda statuses: [s.value for s in statuses]
        ),
        nullable=False,
        default=DeliverableStatus.NOT_STARTED
    )
    notes = Column(Text, nullable=True)
    created_at = Column(DateTime(timezone=True), default=utcnow, server_default=func.now())
    updated_at = Column(
        DateTime(timezone=True),
        default=utcnow,
        server_default=func.now(),
        onupdate=utcnow
    )
