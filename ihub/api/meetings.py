# ihub/api/meetings.py
from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from ..database import get_db
from ..errors import StoreError
from ..models.meeting import Meeting
from ..schemas.meeting import MeetingCreate, Meeting as MeetingSchema
from ..utils.logging import api_logger

router = APIRouter(prefix="/meetings", tags=["meetings"])


@router.post("", response_model=MeetingSchema, status_code=201)
async def create_meeting(meeting: MeetingCreate, db: Session = Depends(get_db)):
    api_logger.info("Creating new meeting", extra={
        "startup_name": meeting.startup_name,
        "department_name": meeting.department_name
    })

    try:
        db_meeting = Meeting(**meeting.model_dump())
        db.add(db_meeting)
        db.commit()
        db.refresh(db_meeting)

        api_logger.info("Meeting created successfully", extra={"meeting_id": db_meeting.id})
        return db_meeting
    except SQLAlchemyError as e:
        db.rollback()
        api_logger.error("Failed to create meeting", extra={"error": str(e)})
        raise StoreError("Error creating meeting")


@router.get("", response_model=List[MeetingSchema])
async def list_meetings(db: Session = Depends(get_db)):
    """Most recent meetings first"""
    try:
        meetings = db.query(Meeting).order_by(Meeting.meeting_date.desc()).all()
        api_logger.info(f"Found {len(meetings)} meetings")
        return meetings
    except SQLAlchemyError as e:
        api_logger.error("Failed to list meetings", extra={"error": str(e)})
        raise StoreError("Error fetching meetings")
