# ihub/api/departments.py
from fastapi import APIRouter, Depends
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from ..database import get_db
from ..errors import StoreError, ValidationError
from ..models.meeting import Meeting
from ..models.resource import Resource
from ..schemas.dashboard import DepartmentDetail
from ..schemas.meeting import Meeting as MeetingSchema
from ..schemas.resource import Resource as ResourceSchema
from ..utils.logging import api_logger

router = APIRouter(prefix="/departments", tags=["departments"])


@router.get("/", include_in_schema=False)
async def department_name_missing():
    raise ValidationError("Department name is required.")


@router.get("/{name}", response_model=DepartmentDetail)
async def get_department(name: str, db: Session = Depends(get_db)):
    """Meetings and resources filed under one department"""
    if not name.strip():
        raise ValidationError("Department name is required.")

    api_logger.info("Fetching department data", extra={"department_name": name})

    try:
        meetings = db.query(Meeting) \
            .filter(Meeting.department_name == name) \
            .order_by(Meeting.meeting_date.desc()) \
            .all()
        resources = db.query(Resource) \
            .filter(Resource.department == name) \
            .order_by(Resource.name) \
            .all()

        api_logger.info("Department data retrieved", extra={
            "department_name": name,
            "meeting_count": len(meetings),
            "resource_count": len(resources)
        })
        return DepartmentDetail(
            department_name=name,
            meetings=[MeetingSchema.model_validate(m) for m in meetings],
            resources=[ResourceSchema.model_validate(r) for r in resources]
        )
    except SQLAlchemyError as e:
        api_logger.error("Failed to fetch department data", extra={
            "department_name": name,
            "error": str(e)
        })
        raise StoreError("Error fetching department data")
