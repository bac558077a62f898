import logging
from pathlib import Path
from typing import Optional

from alembic.config import Config
from alembic import command
from sqlalchemy import inspect
from sqlalchemy.engine import Engine

from app.db.base import Base

logger = logging.getLogger(__name__)

ALEMBIC_INI = Path(__file__).resolve().parents[2] / "alembic.ini"

def run_migrations(revision: str = "head", database_url: Optional[str] = None) -> None:
    """
    Bring the database schema up to `revision` with Alembic.
    """
    try:
        alembic_cfg = Config(str(ALEMBIC_INI))
        if database_url:
            alembic_cfg.set_main_option("sqlalchemy.url", database_url)
        command.upgrade(alembic_cfg, revision)
        logger.info("Database migrations applied successfully")
    except Exception as e:
        logger.error(f"Error applying database migrations: {e}")
        raise


def create_all_tables(engine: Engine) -> set:
    """Create any missing tables; returns the names of the ones created"""
    existing_tables = set(inspect(engine).get_table_names())

    Base.metadata.create_all(bind=engine)

    new_tables = set(inspect(engine).get_table_names()) - existing_tables
    if new_tables:
        logger.info(f"Created new tables: {new_tables}")
    return new_tables
