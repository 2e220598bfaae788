import logging

from sqlalchemy import create_engine, event, inspect
from sqlalchemy.orm import sessionmaker, DeclarativeBase
from app.core.config import settings


logger = logging.getLogger(__name__)


def _make_engine(url: str, echo: bool = False):
    engine = create_engine(
        url,
        connect_args={"check_same_thread": False},
        echo=echo
    )

    @event.listens_for(engine, "connect")
    def _set_sqlite_pragma(dbapi_connection, connection_record):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA journal_mode=WAL")
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()

    return engine


# 确保数据目录存在
_data_dir = settings.database_file.parent
if not _data_dir.exists():
    _data_dir.mkdir(parents=True, exist_ok=True)

engine = _make_engine(settings.database_url, echo=settings.DEBUG)

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


class Base(DeclarativeBase):
    pass


def get_db():
    """Dependency to get database session"""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def init_db() -> None:
    """
    Create tables and indexes if they do not exist yet.
    Schema changes after the first release go through alembic (scripts/migrate.py).
    """
    # 导入模型以注册到 Base.metadata
    import app.models  # noqa: F401

    logger.info("Database location: %s", settings.database_file)
    if inspect(engine).has_table("resources"):
        logger.info("Database already initialized, creating missing indexes only")
    else:
        logger.info("Creating tables")
    # checkfirst: existing tables and indexes are left untouched
    Base.metadata.create_all(bind=engine)
    logger.info("Database ready")


def close_db() -> None:
    engine.dispose()
