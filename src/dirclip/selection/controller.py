"""Interactive choice of the files to copy.

Candidates are shown in a checkbox list framed by two control rows, "Select All"
at the top and "Deselect All" at the bottom. The control rows are sentinel values
of their own types, so a file can never be mistaken for one of them.
"""

from dataclasses import dataclass
from typing import Any, Callable, Iterable, List, Optional, Sequence, Union

from dirclip.exceptions import SelectionCancelledError
from dirclip.file_system_tree.file_entry import FileEntry
from dirclip.selection.checkbox_prompt import Choice, PromptItem, Separator, checkbox
from dirclip.selection.file_icons import icon_for

DEFAULT_MESSAGE = "Select files to copy content:"
EMPTY_SELECTION_MESSAGE = "Please select at least one file."


class SelectAll:
    """Control value: take every candidate."""

    def __repr__(self) -> str:
        return "SELECT_ALL"


class DeselectAll:
    """Control value: take no candidate."""

    def __repr__(self) -> str:
        return "DESELECT_ALL"


SELECT_ALL = SelectAll()
DESELECT_ALL = DeselectAll()


@dataclass(frozen=True)
class FileChoice:
    """Value of a checkbox row standing for a real file."""

    entry: FileEntry


SelectionValue = Union[FileChoice, SelectAll, DeselectAll]
PromptFunction = Callable[[str, Sequence[PromptItem]], Optional[List[Any]]]


def choice_label(entry: FileEntry) -> str:
    """Label of a file row: two spaces per directory level, an icon and the relative path.

    Example:
        >>> from pathlib import Path
        >>> choice_label(FileEntry(Path("/p/src/main.py"), "src/main.py"))
        '  🐍 src/main.py'
    """
    return f"{'  ' * entry.depth}{icon_for(entry.relative_path)} {entry.relative_path}"


def build_choices(candidates: Sequence[FileEntry]) -> List[PromptItem]:
    """Build the rows of the prompt: the control rows framed by separators around the files."""
    items: List[PromptItem] = [Separator(), Choice("Select All", SELECT_ALL), Separator()]
    items.extend(Choice(choice_label(entry), FileChoice(entry)) for entry in candidates)
    items.extend([Separator(), Choice("Deselect All", DESELECT_ALL), Separator()])
    return items


def resolve_selection(checked: Iterable[SelectionValue], candidates: Sequence[FileEntry]) -> List[FileEntry]:
    """Turn the checked rows into the list of files to copy.

    "Select All" wins over everything and yields every candidate. Otherwise "Deselect
    All" yields nothing. Otherwise the checked files are returned in the order they were
    checked in the list, without the control values.

    Example:
        >>> from pathlib import Path
        >>> a, b = FileEntry(Path("/p/a.js"), "a.js"), FileEntry(Path("/p/b.txt"), "b.txt")
        >>> resolve_selection([SELECT_ALL], [a, b]) == [a, b]
        True
        >>> resolve_selection([FileChoice(a), DESELECT_ALL], [a, b])
        []
        >>> resolve_selection([FileChoice(b)], [a, b]) == [b]
        True
    """
    values = list(checked)
    if any(isinstance(value, SelectAll) for value in values):
        return list(candidates)
    if any(isinstance(value, DeselectAll) for value in values):
        return []
    return [value.entry for value in values if isinstance(value, FileChoice)]


def select_files(
    candidates: Sequence[FileEntry],
    *,
    require_selection: bool = False,
    message: str = DEFAULT_MESSAGE,
    prompt: PromptFunction = checkbox,
) -> List[FileEntry]:
    """Ask the user which candidates to copy.

    Args:
        candidates: Files offered for selection, in traversal order.
        require_selection: Ask again while the resolved selection is empty, with a notice
            prepended to the question in the prompt header.
            When False, an empty selection is returned to the caller.
        message: Question shown above the list.
        prompt: The prompt implementation; the curses checkbox by default.

    Returns:
        The chosen files, possibly empty.

    Raises:
        SelectionCancelledError: If the user cancels the prompt.
        PromptUnavailableError: If no interactive terminal is available.
    """
    if not candidates:
        return []

    items = build_choices(candidates)
    question = message
    while True:
        checked = prompt(question, items)
        if checked is None:
            raise SelectionCancelledError("File selection cancelled.")

        selected = resolve_selection(checked, candidates)
        if selected or not require_selection:
            return selected
        question = f"{EMPTY_SELECTION_MESSAGE} {message}"
