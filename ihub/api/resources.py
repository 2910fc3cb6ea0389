# ihub/api/resources.py
from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from ..database import get_db
from ..errors import StoreError
from ..models.resource import Resource
from ..schemas.resource import ResourceCreate, Resource as ResourceSchema
from ..utils.logging import api_logger

router = APIRouter(prefix="/resources", tags=["resources"])


@router.post("", response_model=ResourceSchema, status_code=201)
async def create_resource(resource: ResourceCreate, db: Session = Depends(get_db)):
    api_logger.info("Creating new resource", extra={
        "resource_name": resource.name,
        "department": resource.department
    })

    try:
        db_resource = Resource(**resource.model_dump())
        db.add(db_resource)
        db.commit()
        db.refresh(db_resource)

        api_logger.info("Resource created successfully", extra={"resource_id": db_resource.id})
        return db_resource
    except SQLAlchemyError as e:
        db.rollback()
        api_logger.error("Failed to create resource", extra={"error": str(e)})
        raise StoreError("Error creating resource")


@router.get("", response_model=List[ResourceSchema])
async def list_resources(db: Session = Depends(get_db)):
    try:
        resources = db.query(Resource).order_by(Resource.department, Resource.name).all()
        api_logger.info(f"Found {len(resources)} resources")
        return resources
    except SQLAlchemyError as e:
        api_logger.error("Failed to list resources", extra={"error": str(e)})
        raise StoreError("Error fetching resources")
