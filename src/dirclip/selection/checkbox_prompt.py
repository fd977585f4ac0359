"""Curses-based multi-select checkbox prompt.

The prompt shows a scrollable list of choices and separators. The cursor skips
separators; space toggles the choice under the cursor and enter submits.

Keys:
    up / k, down / j      move the cursor
    page up / page down   move by one screen
    home / end            jump to the first / last choice
    space                 toggle the current choice
    enter                 submit
    q, escape, ctrl+c     cancel
"""

import curses
import sys
from dataclasses import dataclass
from typing import Any, List, Optional, Sequence, Set, Tuple, Union

from dirclip.exceptions import PromptUnavailableError

SUBMIT = "submit"
CANCEL = "cancel"

KEY_CTRL_C = 3
KEY_ESCAPE = 27
KEYS_UP = (curses.KEY_UP, ord("k"))
KEYS_DOWN = (curses.KEY_DOWN, ord("j"))
KEYS_SUBMIT = (curses.KEY_ENTER, 10, 13)
KEYS_CANCEL = (ord("q"), KEY_ESCAPE, KEY_CTRL_C)

POINTER = "❯"
CHECKED_MARK = "◉"
UNCHECKED_MARK = "○"


@dataclass(frozen=True)
class Choice:
    """A selectable row. value is returned when the row is checked at submit time."""

    title: str
    value: Any


@dataclass(frozen=True)
class Separator:
    """A non-selectable row used to group choices visually."""

    title: str = "─" * 15


PromptItem = Union[Choice, Separator]


class CheckboxState:
    """Cursor, checked rows and scroll position of a checkbox list.

    Kept separate from the curses drawing code so the key handling can be exercised
    without a terminal.

    Attributes:
        items: The rows, choices and separators mixed.
        cursor: Index of the row under the cursor, or None if no row is selectable.
        checked: Indices of the checked rows.
        page_size: Number of rows visible at once.
        offset: Index of the first visible row.

    Example:
        >>> state = CheckboxState([Separator(), Choice("a", 1), Choice("b", 2)])
        >>> state.cursor
        1
        >>> state.handle_key(ord(" "))
        >>> state.handle_key(curses.KEY_DOWN)
        >>> state.handle_key(ord(" "))
        >>> state.selected_values()
        [1, 2]
        >>> state.handle_key(10)
        'submit'
    """

    def __init__(self, items: Sequence[PromptItem], page_size: int = 15) -> None:
        self.items = list(items)
        self.page_size = max(1, page_size)
        self.offset = 0
        self.checked: Set[int] = set()
        self._selectable = [i for i, item in enumerate(self.items) if isinstance(item, Choice)]
        self.cursor: Optional[int] = self._selectable[0] if self._selectable else None

    def move(self, step: int) -> None:
        """Move the cursor by step selectable rows, stopping at either end."""
        if self.cursor is None:
            return
        position = self._selectable.index(self.cursor) + step
        position = max(0, min(position, len(self._selectable) - 1))
        self.cursor = self._selectable[position]

    def page(self, direction: int) -> None:
        """Move the cursor by one page of rows (separators included) up or down."""
        if self.cursor is None:
            return
        target = self.cursor + direction * self.page_size
        if direction > 0:
            candidates = [i for i in self._selectable if i >= target]
            self.cursor = candidates[0] if candidates else self._selectable[-1]
        else:
            candidates = [i for i in self._selectable if i <= target]
            self.cursor = candidates[-1] if candidates else self._selectable[0]

    def toggle(self) -> None:
        if self.cursor is None:
            return
        if self.cursor in self.checked:
            self.checked.remove(self.cursor)
        else:
            self.checked.add(self.cursor)

    def selected_values(self) -> List[Any]:
        """Values of the checked choices, in list order."""
        values = []
        for index in sorted(self.checked):
            item = self.items[index]
            assert isinstance(item, Choice)
            values.append(item.value)
        return values

    def handle_key(self, key: int) -> Optional[str]:
        """Apply a key press. Returns SUBMIT or CANCEL when the prompt should end."""
        if key in KEYS_UP:
            self.move(-1)
        elif key in KEYS_DOWN:
            self.move(1)
        elif key == curses.KEY_PPAGE:
            self.page(-1)
        elif key == curses.KEY_NPAGE:
            self.page(1)
        elif key == curses.KEY_HOME:
            self.move(-len(self.items))
        elif key == curses.KEY_END:
            self.move(len(self.items))
        elif key == ord(" "):
            self.toggle()
        elif key in KEYS_SUBMIT:
            return SUBMIT
        elif key in KEYS_CANCEL:
            return CANCEL
        return None

    def visible_rows(self) -> List[Tuple[int, PromptItem]]:
        """Rows to draw, scrolling so that the cursor stays on screen."""
        if self.cursor is not None:
            if self.cursor < self.offset:
                self.offset = self.cursor
            elif self.cursor >= self.offset + self.page_size:
                self.offset = self.cursor - self.page_size + 1
        end = min(len(self.items), self.offset + self.page_size)
        return [(i, self.items[i]) for i in range(self.offset, end)]


def _addstr(stdscr: Any, y: int, text: str, attr: int = 0) -> None:
    max_y, max_x = stdscr.getmaxyx()
    if 0 <= y < max_y and max_x > 1:
        try:
            stdscr.addnstr(y, 0, text, max_x - 1, attr)
        except curses.error:
            pass


def _draw(stdscr: Any, state: CheckboxState, message: str) -> None:
    stdscr.erase()
    max_y, _ = stdscr.getmaxyx()
    state.page_size = max(1, max_y - 2)

    _addstr(stdscr, 0, f"? {message} (space to toggle, enter to confirm, q to cancel)", curses.A_BOLD)
    for y, (index, item) in enumerate(state.visible_rows(), start=1):
        if isinstance(item, Separator):
            _addstr(stdscr, y, f"   {item.title}", curses.A_DIM)
            continue
        pointer = POINTER if index == state.cursor else " "
        mark = CHECKED_MARK if index in state.checked else UNCHECKED_MARK
        attr = curses.A_REVERSE if index == state.cursor else curses.A_NORMAL
        _addstr(stdscr, y, f"{pointer} {mark} {item.title}", attr)

    _addstr(stdscr, max_y - 1, f"{len(state.checked)} selected", curses.A_DIM)
    stdscr.refresh()


def _run(stdscr: Any, message: str, items: Sequence[PromptItem]) -> Optional[List[Any]]:
    # Raw mode delivers ctrl+c as a key instead of a signal
    curses.raw()
    try:
        curses.curs_set(0)
    except curses.error:
        pass
    stdscr.keypad(True)

    state = CheckboxState(items)
    while True:
        _draw(stdscr, state, message)
        key = stdscr.getch()
        action = state.handle_key(key)
        if action == SUBMIT:
            return state.selected_values()
        if action == CANCEL:
            return None


def checkbox(message: str, items: Sequence[PromptItem]) -> Optional[List[Any]]:
    """Show the checkbox prompt and block until the user submits or cancels.

    Args:
        message: Question shown above the list.
        items: Choices and separators, in display order.

    Returns:
        Values of the checked choices in list order, or None if the prompt was cancelled.

    Raises:
        PromptUnavailableError: If stdin or stdout is not a terminal, or curses cannot
            initialise it.
    """
    if not (sys.stdin.isatty() and sys.stdout.isatty()):
        raise PromptUnavailableError("interactive selection requires a terminal")

    sys.stdout.flush()
    try:
        result: Optional[List[Any]] = curses.wrapper(_run, message, items)
    except KeyboardInterrupt:
        return None
    except curses.error as e:
        raise PromptUnavailableError(str(e)) from e
    return result
