"""
Database engine and session management for the persisted entry store.
"""
from contextlib import contextmanager
from typing import Iterator, Optional

from sqlalchemy.engine import Engine
from sqlmodel import Session, SQLModel, create_engine

from lifelog.core.config import settings

_engine: Optional[Engine] = None


def create_db_engine(database_url: str, echo: bool = False) -> Engine:
    """Create an engine for the entry store."""
    connect_args = {}
    if database_url.startswith("sqlite"):
        connect_args["check_same_thread"] = False
    return create_engine(database_url, echo=echo, connect_args=connect_args)


def get_engine() -> Engine:
    """Return the process-wide engine, creating it from settings on first use."""
    global _engine
    if _engine is None:
        _engine = create_db_engine(settings.database_url, echo=settings.echo_sql)
    return _engine


def init_db(engine: Optional[Engine] = None) -> None:
    """Create all tables that do not exist yet."""
    # Register table models on the metadata before create_all.
    from lifelog import models  # noqa: F401

    SQLModel.metadata.create_all(engine or get_engine())


@contextmanager
def get_session(engine: Optional[Engine] = None) -> Iterator[Session]:
    with Session(engine or get_engine()) as session:
        yield session
