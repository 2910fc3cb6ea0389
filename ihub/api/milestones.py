# ihub/api/milestones.py
from fastapi import APIRouter, Depends
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from ..database import get_db
from ..errors import IHubError, NotFound, StoreError
from ..models.milestone import Milestone
from ..models.project import Project
from ..schemas.milestone import MilestoneCreate, Milestone as MilestoneSchema
from ..services.graph import get_record
from ..services.hierarchy import create_and_attach
from ..utils.logging import api_logger

router = APIRouter(prefix="/milestones", tags=["milestones"])


@router.post("", response_model=MilestoneSchema, status_code=201)
async def create_milestone(milestone: MilestoneCreate, db: Session = Depends(get_db)):
    api_logger.info("Creating new milestone", extra={
        "project_id": milestone.project_id,
        "milestone_name": milestone.name
    })

    try:
        project = get_record(db, Project, milestone.project_id, "Project")

        db_milestone = create_and_attach(
            db,
            project,
            "milestone_ids",
            Milestone(**milestone.model_dump(exclude={"project_id"}), deliverable_ids=[]),
            "Milestone"
        )

        api_logger.info("Milestone created successfully", extra={
            "milestone_id": db_milestone.id,
            "project_id": project.id
        })
        return db_milestone
    except NotFound:
        api_logger.warning("Project not found", extra={"project_id": milestone.project_id})
        raise
    except IHubError:
        raise
    except SQLAlchemyError as e:
        db.rollback()
        api_logger.error("Failed to create milestone", extra={
            "milestone_name": milestone.name,
            "error": str(e)
        })
        raise StoreError("Error creating milestone")
