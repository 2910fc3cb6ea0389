# ihub/api/deliverables.py
from fastapi import APIRouter, Depends
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from ..database import get_db
from ..errors import IHubError, NotFound, StoreError
from ..models.deliverable import Deliverable, DeliverableStatus
from ..models.milestone import Milestone
from ..schemas.deliverable import (
    DeliverableCreate, DeliverableUpdate, Deliverable as DeliverableSchema
)
from ..services.graph import get_record
from ..services.hierarchy import create_and_attach
from ..services.status import update_deliverable
from ..utils.logging import api_logger

router = APIRouter(prefix="/deliverables", tags=["deliverables"])


@router.post("", response_model=DeliverableSchema, status_code=201)
async def create_deliverable(deliverable: DeliverableCreate, db: Session = Depends(get_db)):
    api_logger.info("Creating new deliverable", extra={
        "milestone_id": deliverable.milestone_id,
        "deliverable_name": deliverable.name
    })

    try:
        milestone = get_record(db, Milestone, deliverable.milestone_id, "Milestone")

        db_deliverable = create_and_attach(
            db,
            milestone,
            "deliverable_ids",
            Deliverable(
                name=deliverable.name,
                status=deliverable.status or DeliverableStatus.NOT_STARTED,
                notes=deliverable.notes
            ),
            "Deliverable"
        )

        api_logger.info("Deliverable created successfully", extra={
            "deliverable_id": db_deliverable.id,
            "milestone_id": milestone.id
        })
        return db_deliverable
    except NotFound:
        api_logger.warning("Milestone not found", extra={"milestone_id": deliverable.milestone_id})
        raise
    except IHubError:
        raise
    except SQLAlchemyError as e:
        db.rollback()
        api_logger.error("Failed to create deliverable", extra={
            "deliverable_name": deliverable.name,
            "error": str(e)
        })
        raise StoreError("Error creating deliverable")


@router.patch("/{deliverable_id}", response_model=DeliverableSchema)
async def patch_deliverable(deliverable_id: str, update: DeliverableUpdate, db: Session = Depends(get_db)):
    api_logger.info("Updating deliverable", extra={
        "deliverable_id": deliverable_id,
        "update_fields": list(update.model_dump(exclude_none=True).keys())
    })

    try:
        db_deliverable = update_deliverable(db, deliverable_id, update)

        api_logger.info("Deliverable updated successfully", extra={
            "deliverable_id": deliverable_id,
            "status": db_deliverable.status.value
        })
        return db_deliverable
    except NotFound:
        api_logger.warning("Deliverable not found for update", extra={"deliverable_id": deliverable_id})
        raise
    except IHubError:
        raise
    except SQLAlchemyError as e:
        db.rollback()
        api_logger.error("Failed to update deliverable", extra={
            "deliverable_id": deliverable_id,
            "error": str(e)
        })
        raise StoreError("Error updating deliverable")
