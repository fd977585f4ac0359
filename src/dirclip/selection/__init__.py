"""Interactive selection of the files whose contents are copied."""

from .checkbox_prompt import Choice, Separator, checkbox
from .controller import (
    DESELECT_ALL,
    SELECT_ALL,
    DeselectAll,
    FileChoice,
    SelectAll,
    build_choices,
    choice_label,
    resolve_selection,
    select_files,
)
from .file_icons import DEFAULT_ICON, icon_for

__all__ = [
    "Choice",
    "DEFAULT_ICON",
    "DESELECT_ALL",
    "DeselectAll",
    "FileChoice",
    "SELECT_ALL",
    "SelectAll",
    "Separator",
    "build_choices",
    "checkbox",
    "choice_label",
    "icon_for",
    "resolve_selection",
    "select_files",
]
