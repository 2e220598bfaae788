from datetime import datetime, timezone

from sqlalchemy import Column, Integer, String, DateTime, Text, Index, Enum
from app.core.database import Base


RESOURCE_STATUSES = ("active", "inactive")

# SQLite INTEGER is a signed 64-bit value
SQLITE_MAX_INTEGER = 2 ** 63 - 1


def utcnow() -> datetime:
    return datetime.now(timezone.utc).replace(tzinfo=None)


class Resource(Base):
    __tablename__ = "resources"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(255), nullable=False)
    description = Column(Text, nullable=True)
    status = Column(
        Enum(*RESOURCE_STATUSES, name="resource_status", native_enum=False, create_constraint=True, length=16),
        nullable=False,
        default="active",
        server_default="active",
    )

    # UTC, naive; updated_at refreshed by the ORM on every UPDATE
    created_at = Column(DateTime, nullable=False, default=utcnow)
    updated_at = Column(DateTime, nullable=False, default=utcnow, onupdate=utcnow)

    __table_args__ = (
        Index("idx_resources_status", "status"),
        Index("idx_resources_created_at", created_at.desc()),
    )

    def __repr__(self) -> str:
        return f"<Resource id={self.id} name={self.name!r} status={self.status}>"
