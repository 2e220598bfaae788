"""
Resource persistence: one SQLAlchemy statement per operation.
Callers own the session; errors propagate as SQLAlchemyError.
"""
import logging
from typing import List, Optional, Tuple

from sqlalchemy import or_
from sqlalchemy.orm import Session

from app.models.resource import Resource, utcnow
from app.schemas.resource import ResourceCreate, ResourceUpdate


logger = logging.getLogger(__name__)


def create_resource(db: Session, data: ResourceCreate) -> Resource:
    now = utcnow()
    resource = Resource(
        name=data.name,
        description=data.description,
        status=data.status,
        created_at=now,
        updated_at=now,
    )
    db.add(resource)
    db.commit()
    db.refresh(resource)
    logger.info("Created resource %s", resource.id)
    return resource


def list_resources(
    db: Session,
    status: Optional[str] = None,
    search: Optional[str] = None,
    limit: int = 20,
    offset: int = 0,
) -> Tuple[List[Resource], int]:
    """Return one page (newest first) and the total count for the same filters"""
    query = db.query(Resource)

    if status:
        query = query.filter(Resource.status == status)

    if search:
        # literal substring match, % and _ in the search text are escaped
        query = query.filter(or_(
            Resource.name.contains(search, autoescape=True),
            Resource.description.contains(search, autoescape=True),
        ))

    total = query.count()
    items = query.order_by(Resource.created_at.desc(), Resource.id.desc()) \
        .offset(offset) \
        .limit(limit) \
        .all()
    return items, total


def get_resource(db: Session, resource_id: int) -> Optional[Resource]:
    return db.query(Resource).filter(Resource.id == resource_id).first()


def update_resource(db: Session, resource: Resource, data: ResourceUpdate) -> Resource:
    for field, value in data.changes().items():
        setattr(resource, field, value)
    # also refreshed when the values are unchanged
    resource.updated_at = utcnow()
    db.commit()
    db.refresh(resource)
    logger.info("Updated resource %s", resource.id)
    return resource


def delete_resource(db: Session, resource: Resource) -> None:
    resource_id = resource.id
    db.delete(resource)
    db.commit()
    logger.info("Deleted resource %s", resource_id)
