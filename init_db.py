"""
Database initialization script.
Creates all tables for the configured DATABASE_URL, or applies the Alembic
migrations when run with --migrate.
Run this as: python init_db.py [--migrate]
"""

import argparse
import logging
import sys

from sqlalchemy import inspect

from app.core.config import Settings
from app.db.init_db import create_all_tables, run_migrations
from app.db.session import create_db_engine

# Configure logging
logging.basicConfig(level=logging.INFO, format="%(asctime)s - %(name)s - %(levelname)s - %(message)s")
logger = logging.getLogger("db-init")

def init_db(settings: Settings) -> bool:
    """Initialize the database by creating all tables."""
    engine = create_db_engine(settings.DATABASE_URL)
    try:
        logger.info(f"Existing tables: {inspect(engine).get_table_names()}")
        new_tables = create_all_tables(engine)
        if new_tables:
            logger.info(f"Newly created tables: {new_tables}")
        else:
            logger.info("No new tables were created")
        return True
    except Exception as e:
        logger.error(f"Error creating tables: {e}")
        return False
    finally:
        engine.dispose()

def migrate_db(settings: Settings) -> bool:
    try:
        run_migrations(database_url=settings.DATABASE_URL)
        return True
    except Exception:
        return False

if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Initialize the database")
    parser.add_argument("--migrate", action="store_true", help="Apply Alembic migrations instead of create_all")
    args = parser.parse_args()

    settings = Settings()
    logger.info("Starting database initialization")
    ok = migrate_db(settings) if args.migrate else init_db(settings)
    if ok:
        logger.info("Database initialization completed successfully")
    else:
        logger.error("Database initialization failed")
        sys.exit(1)
