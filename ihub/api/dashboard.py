# ihub/api/dashboard.py
from fastapi import APIRouter, Depends
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session
from sqlalchemy.sql import func

from ..database import get_db
from ..errors import StoreError
from ..models.deliverable import Deliverable, DeliverableStatus
from ..models.meeting import Meeting
from ..models.milestone import Milestone
from ..schemas.dashboard import DashboardStats
from ..services.graph import expand_milestones
from ..services.progress import is_milestone_complete
from ..utils.logging import api_logger

router = APIRouter(tags=["dashboard"])


@router.get("/dashboard-stats", response_model=DashboardStats)
async def get_dashboard_stats(db: Session = Depends(get_db)):
    """Program-wide counters"""
    try:
        meeting_count = db.query(func.count(Meeting.id)).scalar()
        completed_deliverables = db.query(func.count(Deliverable.id)) \
            .filter(Deliverable.status == DeliverableStatus.COMPLETED) \
            .scalar()

        # A milestone counts once all of its deliverables are completed
        milestones = expand_milestones(db, db.query(Milestone).all())
        completed_milestones = sum(1 for m in milestones if is_milestone_complete(m))

        api_logger.info("Dashboard stats computed", extra={
            "total_meetings": meeting_count,
            "total_completed_deliverables": completed_deliverables,
            "total_completed_milestones": completed_milestones
        })
        return DashboardStats(
            total_meetings=meeting_count or 0,
            total_completed_deliverables=completed_deliverables or 0,
            total_completed_milestones=completed_milestones
        )
    except SQLAlchemyError as e:
        api_logger.error("Failed to compute dashboard stats", extra={"error": str(e)})
        raise StoreError("Error fetching dashboard stats")
