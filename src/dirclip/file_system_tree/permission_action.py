"""Permission action enum for handling access errors during directory traversal."""

from enum import Enum


class PermissionAction(str, Enum):
    """Action to take when a directory cannot be listed during traversal.

    Values:
        IGNORE: Keep the directory node but skip its contents, recording the failure
        RAISE: Raise a PermissionError (or OSError) immediately (default behavior)
    """

    IGNORE = "ignore"
    RAISE = "raise"
