"""
Shared fixtures for the unit test suite.
"""
import pytest
from sqlmodel import Session, create_engine

from lifelog.models.base import BaseModel
from lifelog.models.journal_entry import JournalEntry  # noqa: F401 - registers the table


@pytest.fixture
def session():
    """In-memory SQLite entry store session."""
    engine = create_engine("sqlite:///:memory:")
    BaseModel.metadata.create_all(engine)
    with Session(engine) as session:
        yield session
    engine.dispose()
