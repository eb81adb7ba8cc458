from __future__ import annotations

from enum import Enum


class SplitOptions(str, Enum):
    """Empty-entry policy for delimited settings."""

    NONE = "none"  # keep empty segments
    REMOVE_EMPTY_ENTRIES = "remove_empty_entries"
