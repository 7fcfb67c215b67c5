"""
Database schema and engine setup.

Tables are declared with SQLAlchemy Core and created at startup.
"""

import logging

from sqlalchemy import (
    Boolean,
    Column,
    Date,
    Integer,
    MetaData,
    String,
    Table,
    UniqueConstraint,
    create_engine,
)
from sqlalchemy.engine import Engine
from sqlalchemy.pool import StaticPool

logger = logging.getLogger(__name__)

metadata = MetaData()

polls = Table(
    "polls",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("title", String(100), nullable=False),
    Column("summary", String(1500), nullable=False),
    Column("is_published", Boolean, nullable=False, default=False),
    Column("starts_at", Date, nullable=False),
    Column("ends_at", Date, nullable=False),
    UniqueConstraint("title", name="uix_polls_title"),
)

users = Table(
    "users",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("email", String(256), nullable=False),
    Column("first_name", String(100), nullable=False),
    Column("last_name", String(100), nullable=False),
    Column("password_hash", String(256), nullable=False),
    UniqueConstraint("email", name="uix_users_email"),
)


def build_engine(database_url: str) -> Engine:
    """Build a SQLAlchemy engine for the given URL.

    SQLite connections are shared across FastAPI worker threads, and an
    in-memory SQLite database is pinned to a single connection so that
    every session sees the same data.
    """
    if not database_url.startswith("sqlite"):
        return create_engine(database_url, pool_pre_ping=True)

    kwargs = {"connect_args": {"check_same_thread": False}}
    if ":memory:" in database_url or database_url in ("sqlite://", "sqlite:///"):
        kwargs["poolclass"] = StaticPool
    return create_engine(database_url, **kwargs)


def init_db(engine: Engine) -> None:
    """Create missing tables."""
    metadata.create_all(engine)
    logger.info("Database schema ready at %s", engine.url.render_as_string(hide_password=True))
