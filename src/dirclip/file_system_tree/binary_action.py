"""Binary action enum for handling binary files selected for aggregation."""

from enum import Enum


class BinaryAction(str, Enum):
    """Action to take when a selected file is binary or cannot be decoded as text.

    Values:
        IGNORE: Leave the file out of the payload and record it as skipped (default behavior)
        RAISE: Raise BinaryFileError and abort the aggregation
    """

    IGNORE = "ignore"
    RAISE = "raise"
