# ihub/api/startups.py
import time
from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from ..database import get_db
from ..errors import IHubError, NotFound, StoreError, ValidationError
from ..models.startup import Startup
from ..schemas.progress import CoordinateStatusUpdate, ProjectView, StartupView
from ..schemas.startup import StartupCreate, Startup as StartupSchema
from ..services.graph import load_all_startup_graphs, load_startup_graph
from ..services.status import update_status_by_coordinate
from ..utils.logging import api_logger

router = APIRouter(prefix="/startups", tags=["startups"])


@router.post("", response_model=StartupSchema, status_code=201)
async def create_startup(startup: StartupCreate, db: Session = Depends(get_db)):
    api_logger.info("Creating new startup", extra={"startup_name": startup.name})

    try:
        db_startup = Startup(**startup.model_dump(), project_ids=[])
        db.add(db_startup)
        db.commit()
        db.refresh(db_startup)

        api_logger.info("Startup created successfully", extra={
            "startup_id": db_startup.id,
            "startup_name": db_startup.name
        })
        return db_startup
    except IntegrityError as e:
        db.rollback()
        api_logger.warning("Duplicate startup name", extra={
            "startup_name": startup.name,
            "error": str(e)
        })
        raise ValidationError(f"A startup named '{startup.name}' already exists")
    except SQLAlchemyError as e:
        db.rollback()
        api_logger.error("Failed to create startup", extra={
            "startup_name": startup.name,
            "error": str(e)
        })
        raise StoreError("Error creating startup")


@router.get("/progress", response_model=List[StartupView])
async def list_startups_with_progress(db: Session = Depends(get_db)):
    """All startups with their projects, each project annotated with progress"""
    api_logger.info("Listing startups with progress", extra={
        "endpoint": "/startups/progress",
        "method": "GET"
    })

    try:
        start_time = time.time()
        startups = load_all_startup_graphs(db)

        execution_time = time.time() - start_time
        api_logger.info("Successfully computed startup progress", extra={
            "startup_count": len(startups),
            "execution_time_ms": round(execution_time * 1000, 2)
        })
        return startups
    except SQLAlchemyError as e:
        api_logger.error("Failed to load startups", extra={"error": str(e)})
        raise StoreError("Error fetching startup progress")


@router.post("/progress", response_model=ProjectView)
async def update_deliverable_status(update: CoordinateStatusUpdate, db: Session = Depends(get_db)):
    """Set a deliverable's status by its full coordinate and return the project's new progress"""
    api_logger.info("Updating deliverable status by coordinate", extra={
        "startup_id": update.startup_id,
        "project_id": update.project_id,
        "milestone_id": update.milestone_id,
        "deliverable_id": update.deliverable_id,
        "status": update.status.value
    })

    try:
        project = update_status_by_coordinate(db, update)

        api_logger.info("Deliverable status updated", extra={
            "project_id": project.id,
            "percentage": project.progress.percentage
        })
        return project
    except NotFound as e:
        api_logger.warning(e.message, extra={"deliverable_id": update.deliverable_id})
        raise
    except IHubError:
        raise
    except SQLAlchemyError as e:
        db.rollback()
        api_logger.error("Failed to update deliverable status", extra={
            "deliverable_id": update.deliverable_id,
            "error": str(e)
        })
        raise StoreError("Error updating deliverable status")


@router.get("/{startup_id}/progress", response_model=StartupView)
async def get_startup_progress(startup_id: str, db: Session = Depends(get_db)):
    api_logger.info("Fetching startup progress", extra={"startup_id": startup_id})

    try:
        startup = load_startup_graph(db, startup_id)

        api_logger.info("Startup progress retrieved", extra={
            "startup_id": startup_id,
            "project_count": len(startup.projects)
        })
        return startup
    except NotFound:
        api_logger.warning("Startup not found", extra={"startup_id": startup_id})
        raise
    except IHubError:
        raise
    except SQLAlchemyError as e:
        api_logger.error("Failed to load startup", extra={
            "startup_id": startup_id,
            "error": str(e)
        })
        raise StoreError("Error fetching startup progress")
