"""
Import utility modules.
"""
from .constants import ImportConfig
from .progress_utils import ImportCheckpoint, ProgressCallback, create_throttled_progress_callback
from .validators import validate_content, validate_journal_entry, validate_location

__all__ = [
    "create_throttled_progress_callback",
    "ImportCheckpoint",
    "ImportConfig",
    "ProgressCallback",
    "validate_content",
    "validate_journal_entry",
    "validate_location",
]
