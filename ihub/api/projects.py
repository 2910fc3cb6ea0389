# ihub/api/projects.py
from fastapi import APIRouter, Depends
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from ..database import get_db
from ..errors import IHubError, NotFound, StoreError
from ..models.project import Project
from ..models.startup import Startup
from ..schemas.project import ProjectCreate, Project as ProjectSchema
from ..services.graph import get_record
from ..services.hierarchy import create_and_attach
from ..utils.logging import api_logger

router = APIRouter(prefix="/projects", tags=["projects"])


@router.post("", response_model=ProjectSchema, status_code=201)
async def create_project(project: ProjectCreate, db: Session = Depends(get_db)):
    api_logger.info("Creating new project", extra={
        "startup_id": project.startup_id,
        "project_name": project.name
    })

    try:
        startup = get_record(db, Startup, project.startup_id, "Startup")

        db_project = create_and_attach(
            db,
            startup,
            "project_ids",
            Project(**project.model_dump(exclude={"startup_id"}), milestone_ids=[]),
            "Project"
        )

        api_logger.info("Project created successfully", extra={
            "project_id": db_project.id,
            "startup_id": startup.id
        })
        return db_project
    except NotFound:
        api_logger.warning("Startup not found", extra={"startup_id": project.startup_id})
        raise
    except IHubError:
        raise
    except SQLAlchemyError as e:
        db.rollback()
        api_logger.error("Failed to create project", extra={
            "project_name": project.name,
            "error": str(e)
        })
        raise StoreError("Error creating project")
