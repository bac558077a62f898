"""
Schema management for the Threads API database.

    python migrations/manage_db.py migrate [revision]
    python migrations/manage_db.py migrate --downgrade <revision>
    python migrations/manage_db.py create "add posts index"
    python migrations/manage_db.py current
    python migrations/manage_db.py history
"""
import logging
import argparse
from pathlib import Path

from alembic.config import Config
from alembic import command

logging.basicConfig(level=logging.INFO, format="%(asctime)s - %(name)s - %(levelname)s - %(message)s")
logger = logging.getLogger("manage-db")

ALEMBIC_INI = str(Path(__file__).resolve().parents[1] / "alembic.ini")

def _alembic_config(args) -> Config:
    cfg = Config(ALEMBIC_INI)
    # Without --database-url, alembic/env.py falls back to Settings().DATABASE_URL
    if args.database_url:
        cfg.set_main_option("sqlalchemy.url", args.database_url)
    return cfg

def run_migration(args):
    direction = "downgrade" if args.downgrade else "upgrade"
    if args.downgrade and args.revision == "head":
        raise SystemExit("A target revision is required to downgrade (e.g. -1 or base)")
    try:
        getattr(command, direction)(_alembic_config(args), args.revision)
        logger.info(f"Migration {direction} to {args.revision} completed")
    except Exception as e:
        logger.error(f"Migration {direction} failed: {e}")
        raise

def create_migration(args):
    """Autogenerate a revision from the difference between models and database"""
    try:
        command.revision(_alembic_config(args), message=args.message, autogenerate=True)
        logger.info(f"Created migration '{args.message}'")
    except Exception as e:
        logger.error(f"Failed to create migration: {e}")
        raise

def show_current(args):
    command.current(_alembic_config(args), verbose=True)

def show_history(args):
    command.history(_alembic_config(args))

def main():
    parser = argparse.ArgumentParser(description="Database management commands")
    parser.add_argument("--database-url", help="Override DATABASE_URL for this command")
    subparsers = parser.add_subparsers(dest="command", help="Commands")

    migrate_parser = subparsers.add_parser("migrate", help="Run migrations")
    migrate_parser.add_argument("--downgrade", action="store_true", help="Downgrade instead of upgrade")
    migrate_parser.add_argument("revision", nargs="?", default="head", help="Revision to migrate to")
    migrate_parser.set_defaults(func=run_migration)

    create_parser = subparsers.add_parser("create", help="Create a new migration")
    create_parser.add_argument("message", help="Migration message")
    create_parser.set_defaults(func=create_migration)

    current_parser = subparsers.add_parser("current", help="Show the revision the database is at")
    current_parser.set_defaults(func=show_current)

    history_parser = subparsers.add_parser("history", help="List known revisions")
    history_parser.set_defaults(func=show_history)

    args = parser.parse_args()
    if hasattr(args, 'func'):
        args.func(args)
    else:
        parser.print_help()

if __name__ == "__main__":
    main()
