"""
Validation of canonical journal entries produced by an import.
"""
from typing import Optional

from lifelog.core.exceptions import (
    ContentTooLongError,
    EmptyContentError,
    InvalidLocationError,
)
from lifelog.models.journal_entry import JournalEntry

from .constants import ImportConfig


def validate_content(content: Optional[str]) -> None:
    """
    Raises:
        EmptyContentError: If content is missing or whitespace only
        ContentTooLongError: If content exceeds the length ceiling
    """
    if content is None or not content.strip():
        raise EmptyContentError()
    if len(content) > ImportConfig.MAX_CONTENT_LENGTH:
        raise ContentTooLongError(
            f"Entry content exceeds maximum length "
            f"({len(content)} > {ImportConfig.MAX_CONTENT_LENGTH} characters)"
        )


def validate_location(latitude: Optional[float], longitude: Optional[float]) -> None:
    """
    Coordinates are all-or-nothing and must be within range; bounds are inclusive.

    Raises:
        InvalidLocationError: If exactly one coordinate is present or a value is out of range
    """
    if latitude is None and longitude is None:
        return
    if latitude is None or longitude is None:
        raise InvalidLocationError(
            "Invalid location coordinates: latitude and longitude must both be present"
        )
    if not ImportConfig.MIN_LATITUDE <= latitude <= ImportConfig.MAX_LATITUDE:
        raise InvalidLocationError(f"Invalid location coordinates: latitude {latitude} out of range")
    if not ImportConfig.MIN_LONGITUDE <= longitude <= ImportConfig.MAX_LONGITUDE:
        raise InvalidLocationError(f"Invalid location coordinates: longitude {longitude} out of range")


def validate_journal_entry(entry: JournalEntry) -> JournalEntry:
    """Check an assembled entry against all canonical invariants and return it."""
    validate_content(entry.content)
    validate_location(entry.latitude, entry.longitude)
    return entry
