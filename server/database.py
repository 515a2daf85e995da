# server/database.py

import logging
from datetime import datetime, timezone
from pathlib import Path

from sqlalchemy import create_engine
from sqlalchemy.engine import make_url
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.orm.exc import StaleDataError
from sqlalchemy.pool import StaticPool

import config
from core.errors import ConflictError
from models import Base


logger = logging.getLogger(__name__)


def create_db_engine(database_url: str):
    """
    Builds the engine for the configured URL.
    SQLite databases get a thread-agnostic connection; an in-memory
    database is pinned to a single shared connection.
    """
    url = make_url(database_url)
    if url.get_backend_name() != "sqlite":
        return create_engine(database_url, pool_pre_ping=True)

    if url.database and url.database != ":memory:":
        Path(url.database).parent.mkdir(parents=True, exist_ok=True)
        return create_engine(
            database_url,
            connect_args={"check_same_thread": False}
        )

    return create_engine(
        database_url,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool
    )


engine = create_db_engine(config.DATABASE_URL)

SessionLocal = sessionmaker(
    autocommit=False,
    autoflush=False,
    bind=engine
)


def init_db():
    Base.metadata.create_all(bind=engine)


def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def save_user(db: Session, user) -> None:
    """
    Commits every pending change of a user document as one unit.
    The user row is always touched so its version counter moves, and a
    concurrent write that got there first is reported as a conflict.
    """
    user.updated_at = datetime.now(timezone.utc)
    try:
        db.commit()
    except StaleDataError:
        db.rollback()
        logger.warning("Concurrent update detected for user %s", user.id)
        raise ConflictError("Profile was updated concurrently, please retry")
