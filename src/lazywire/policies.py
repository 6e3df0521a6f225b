from enum import Enum


class DuplicateNamePolicy(str, Enum):
    """Policy for descriptors that export an already registered name."""

    REPLACE = "replace"
    """Keep the last registered callable and drop the earlier one silently."""

    ERROR = "error"
    """Raise ``LazyWireDuplicateNameError`` on the second registration."""
