import logging
from typing import Annotated, Optional

from fastapi import APIRouter, Depends, Path, Query, status
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.core.database import get_db
from app.core.exceptions import ApiError, NotFoundError
from app.models.resource import SQLITE_MAX_INTEGER
from app.schemas.common import ApiResponse, PaginatedResponse, Pagination
from app.schemas.resource import ResourceCreate, ResourceUpdate, ResourceResponse, ResourceStatus
from app.services import resource as resource_service


router = APIRouter(prefix="/resources", tags=["Resources"])
logger = logging.getLogger(__name__)

ResourceId = Annotated[int, Path(gt=0, description="Resource ID (positive integer)")]


def _db_failure(db: Session, action: str) -> ApiError:
    db.rollback()
    logger.exception("Error trying to %s", action)
    return ApiError(status.HTTP_500_INTERNAL_SERVER_ERROR, f"Failed to {action}")


def _get_or_404(db: Session, resource_id: int, action: str):
    # ids past the column range can never match a row
    if resource_id > SQLITE_MAX_INTEGER:
        raise NotFoundError()
    try:
        resource = resource_service.get_resource(db, resource_id)
    except SQLAlchemyError:
        raise _db_failure(db, action)
    if resource is None:
        raise NotFoundError()
    return resource


@router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    response_model=ApiResponse[ResourceResponse],
    response_model_exclude_unset=True,
)
def create_resource(resource_in: ResourceCreate, db: Session = Depends(get_db)):
    """Create a new resource"""
    try:
        resource = resource_service.create_resource(db, resource_in)
    except SQLAlchemyError:
        raise _db_failure(db, "create resource")

    return ApiResponse(
        success=True,
        data=ResourceResponse.model_validate(resource),
        message="Resource created successfully",
    )


@router.get(
    "",
    response_model=PaginatedResponse[ResourceResponse],
    response_model_exclude_unset=True,
)
def list_resources(
    resource_status: Optional[ResourceStatus] = Query(None, alias="status"),
    search: Optional[str] = Query(None, description="Substring of name or description"),
    limit: int = Query(20, ge=1, le=100),
    offset: int = Query(0, ge=0, le=SQLITE_MAX_INTEGER),
    db: Session = Depends(get_db),
):
    """List resources, newest first, with optional filters"""
    search = search.strip() if search else None
    try:
        items, total = resource_service.list_resources(
            db, status=resource_status, search=search, limit=limit, offset=offset
        )
    except SQLAlchemyError:
        raise _db_failure(db, "fetch resources")

    return PaginatedResponse(
        success=True,
        data=[ResourceResponse.model_validate(item) for item in items],
        pagination=Pagination(
            total=total,
            limit=limit,
            offset=offset,
            has_more=offset + limit < total,
        ),
    )


@router.get(
    "/{id}",
    response_model=ApiResponse[ResourceResponse],
    response_model_exclude_unset=True,
)
def get_resource(id: ResourceId, db: Session = Depends(get_db)):
    """Get a single resource by ID"""
    resource = _get_or_404(db, id, "fetch resource")
    return ApiResponse(success=True, data=ResourceResponse.model_validate(resource))


@router.put(
    "/{id}",
    response_model=ApiResponse[ResourceResponse],
    response_model_exclude_unset=True,
)
def update_resource(resource_in: ResourceUpdate, id: ResourceId, db: Session = Depends(get_db)):
    """Update the given fields of a resource"""
    resource = _get_or_404(db, id, "update resource")
    try:
        resource = resource_service.update_resource(db, resource, resource_in)
    except SQLAlchemyError:
        raise _db_failure(db, "update resource")

    return ApiResponse(
        success=True,
        data=ResourceResponse.model_validate(resource),
        message="Resource updated successfully",
    )


@router.delete("/{id}", response_model=ApiResponse, response_model_exclude_unset=True)
def delete_resource(id: ResourceId, db: Session = Depends(get_db)):
    """Delete a resource"""
    resource = _get_or_404(db, id, "delete resource")
    try:
        resource_service.delete_resource(db, resource)
    except SQLAlchemyError:
        raise _db_failure(db, "delete resource")

    return ApiResponse(success=True, message="Resource deleted successfully")
