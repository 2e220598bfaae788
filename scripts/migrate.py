#!/usr/bin/env python3
"""
执行数据库迁移 (alembic upgrade head)

使用方法:
    python scripts/migrate.py
"""

import sys
import os
import logging

ROOT_DIR = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))

# 添加项目根目录到路径
sys.path.insert(0, ROOT_DIR)

from alembic import command
from alembic.config import Config
from sqlalchemy import create_engine, inspect

from app.core.config import settings
from app.core.logger import setup_logging


logger = logging.getLogger("app.scripts.migrate")


def run_migrations(revision: str = "head") -> None:
    config = Config(os.path.join(ROOT_DIR, "alembic.ini"))
    config.set_main_option("script_location", os.path.join(ROOT_DIR, "alembic"))
    config.attributes["configure_logger"] = False
    settings.database_file.parent.mkdir(parents=True, exist_ok=True)

    # 表已由应用启动时创建 (init_db), 只记录版本
    engine = create_engine(settings.database_url)
    try:
        tables = inspect(engine).get_table_names()
    finally:
        engine.dispose()
    if "resources" in tables and "alembic_version" not in tables:
        logger.info("Database already initialized, stamping revision %s", revision)
        command.stamp(config, revision)
        return

    logger.info("Running migrations on %s", settings.database_file)
    command.upgrade(config, revision)
    logger.info("Migrations completed successfully")


if __name__ == "__main__":
    setup_logging()
    try:
        run_migrations()
    except Exception:
        logger.exception("Migration failed")
        sys.exit(1)
