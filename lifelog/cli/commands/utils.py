"""
Shared helpers for CLI commands.
"""
from typing import Optional

from sqlalchemy.engine import Engine

from lifelog.core.database import create_db_engine, get_engine, init_db


def resolve_engine(database_url: Optional[str]) -> Engine:
    """Engine for ``database_url`` or the configured store, with tables created."""
    engine = create_db_engine(database_url) if database_url else get_engine()
    init_db(engine)
    return engine
