"""
HUB Database Initialization

Manages servers.db. The schema is created on first start and older databases
are brought forward with additive migrations (columns are only ever added).
"""

import os
import logging

from sqlalchemy import create_engine, event, inspect, select, func, text
from sqlalchemy.engine import Engine
from sqlalchemy.orm import sessionmaker

from hub import logic
from hub.config import DATABASE_URL, SEED_SAMPLE_DATA
from hub.models import Base, Server
from hub.sample_data import SAMPLE_SERVERS

logger = logging.getLogger(__name__)

# Columns added to `services` after the first release, with their DDL types
SERVICE_COLUMN_MIGRATIONS = [
    ("image", "TEXT"),
    ("healthcheck_url", "TEXT"),
    ("healthcheck_expected_status", "INTEGER"),
    ("healthcheck_enabled", "INTEGER DEFAULT 0"),
    ("public_url", "TEXT"),
]


def configure_sqlite(target: Engine) -> Engine:
    """Enable WAL journaling and foreign keys on every new SQLite connection."""
    if target.dialect.name != "sqlite":
        return target

    @event.listens_for(target, "connect")
    def _set_sqlite_pragma(dbapi_connection, connection_record):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA journal_mode=WAL")
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()

    return target


def _ensure_sqlite_dir(url: str):
    if url.startswith("sqlite:///") and ":memory:" not in url:
        db_file = url[len("sqlite:///"):]
        parent = os.path.dirname(db_file)
        if parent:
            os.makedirs(parent, exist_ok=True)


_ensure_sqlite_dir(DATABASE_URL)

engine = configure_sqlite(create_engine(DATABASE_URL, connect_args={"check_same_thread": False}))
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


def init_db(bind: Engine = None, seed: bool = None):
    """
    Initialize servers.db with schema, migrations and (optionally) sample data.
    """
    bind = bind or engine
    seed = SEED_SAMPLE_DATA if seed is None else seed

    logger.info("Initializing HUB database...")
    Base.metadata.create_all(bind=bind)
    _run_migrations(bind)

    if seed:
        _seed_sample_data(bind)

    logger.info("HUB database initialization complete")


def _run_migrations(bind: Engine):
    """Add columns that older servers.db files are missing. Never drops data."""
    inspector = inspect(bind)

    if "services" not in inspector.get_table_names():
        return

    service_cols = {col["name"] for col in inspector.get_columns("services")}
    with bind.begin() as conn:
        for column, ddl in SERVICE_COLUMN_MIGRATIONS:
            if column not in service_cols:
                conn.execute(text(f"ALTER TABLE services ADD COLUMN {column} {ddl}"))
                logger.info(f"Migrated services table: added column {column}")


def _seed_sample_data(bind: Engine):
    """Seed the sample servers if no servers exist"""
    db = sessionmaker(autocommit=False, autoflush=False, bind=bind)()
    try:
        if db.scalar(select(func.count()).select_from(Server)):
            return

        for server_data in SAMPLE_SERVERS:
            services = server_data.get("services", [])
            logic.create_server(
                db,
                name=server_data["name"],
                host=server_data["host"],
                description=server_data.get("description"),
                server_id=server_data["id"],
            )
            for service_data in services:
                logic.create_service(db, server_data["id"], **service_data)
            logger.info(f"Seeded sample server: {server_data['name']}")
    except Exception as e:
        db.rollback()
        logger.error(f"Failed to seed sample data: {e}")
        raise
    finally:
        db.close()


def get_db():
    """FastAPI dependency for database session"""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def reset_db(bind: Engine = None):
    """
    Drop all tables and recreate (DESTRUCTIVE - dev/test only).
    """
    bind = bind or engine
    logger.warning("Resetting HUB database - all servers and services will be lost!")
    Base.metadata.drop_all(bind=bind)
    Base.metadata.create_all(bind=bind)
    logger.info("HUB database reset complete")
