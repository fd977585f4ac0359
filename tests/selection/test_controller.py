"""Unit tests for the selection controller."""

from pathlib import Path
from unittest.mock import MagicMock, patch

import pytest

from dirclip.exceptions import SelectionCancelledError
from dirclip.file_system_tree.file_entry import FileEntry
from dirclip.selection.checkbox_prompt import Choice, Separator
from dirclip.selection.controller import (
    DESELECT_ALL,
    EMPTY_SELECTION_MESSAGE,
    SELECT_ALL,
    DeselectAll,
    FileChoice,
    SelectAll,
    build_choices,
    choice_label,
    resolve_selection,
    select_files,
)

A = FileEntry(Path("/proj/a.js"), "a.js")
B = FileEntry(Path("/proj/b.txt"), "b.txt")
NESTED = FileEntry(Path("/proj/src/util/helpers.py"), "src/util/helpers.py")


def prompt_returning(*results):
    """A fake prompt that returns the given results on successive calls."""
    return MagicMock(side_effect=list(results))


def test_choice_label_indents_by_depth():
    assert choice_label(A) == "📜 a.js"
    assert choice_label(B) == "📝 b.txt"
    assert choice_label(NESTED) == "    🐍 src/util/helpers.py"


def test_build_choices_layout():
    items = build_choices([A, B])
    assert [type(item) for item in items] == [Separator, Choice, Separator, Choice, Choice, Separator, Choice, Separator]
    assert items[1] == Choice("Select All", SELECT_ALL)
    assert items[3].value == FileChoice(A)
    assert items[4].value == FileChoice(B)
    assert items[6] == Choice("Deselect All", DESELECT_ALL)


def test_sentinels_never_equal_files():
    named_like_sentinel = FileEntry(Path("/proj/SELECT_ALL"), "SELECT_ALL")
    assert resolve_selection([FileChoice(named_like_sentinel)], [A, named_like_sentinel]) == [named_like_sentinel]
    assert FileChoice(named_like_sentinel) != SELECT_ALL
    assert isinstance(SELECT_ALL, SelectAll) and isinstance(DESELECT_ALL, DeselectAll)


def test_select_all_only():
    assert resolve_selection([SELECT_ALL], [A, B]) == [A, B]


def test_select_all_dominates():
    assert resolve_selection([FileChoice(B), SELECT_ALL, DESELECT_ALL], [A, B]) == [A, B]


def test_deselect_all_clears():
    assert resolve_selection([FileChoice(A), FileChoice(B), DESELECT_ALL], [A, B]) == []


def test_checked_files_only():
    assert resolve_selection([FileChoice(B)], [A, B]) == [B]


def test_nothing_checked():
    assert resolve_selection([], [A, B]) == []


def test_select_files_with_select_all():
    prompt = prompt_returning([SELECT_ALL])
    assert select_files([A, B], prompt=prompt) == [A, B]
    message, items = prompt.call_args.args
    assert message == "Select files to copy content:"
    assert items == build_choices([A, B])


def test_select_files_empty_selection_returns_empty():
    prompt = prompt_returning([])
    assert select_files([A, B], prompt=prompt) == []
    assert prompt.call_count == 1


def test_select_files_reprompts_when_required(capsys):
    prompt = prompt_returning([], [DESELECT_ALL], [FileChoice(A)])
    assert select_files([A, B], require_selection=True, message="Pick:", prompt=prompt) == [A]
    assert [call.args[0] for call in prompt.call_args_list] == [
        "Pick:",
        f"{EMPTY_SELECTION_MESSAGE} Pick:",
        f"{EMPTY_SELECTION_MESSAGE} Pick:",
    ]
    # The notice lives in the prompt header, not on the terminal between prompts
    assert capsys.readouterr().out == ""


def test_select_files_cancelled():
    with pytest.raises(SelectionCancelledError):
        select_files([A, B], prompt=prompt_returning(None))


def test_select_files_without_candidates_does_not_prompt():
    prompt = prompt_returning()
    assert select_files([], prompt=prompt) == []
    prompt.assert_not_called()


def test_custom_message():
    prompt = prompt_returning([FileChoice(A)])
    select_files([A], message="Pick:", prompt=prompt)
    assert prompt.call_args.args[0] == "Pick:"


def test_default_prompt_is_curses_checkbox():
    with patch("dirclip.selection.checkbox_prompt.curses.wrapper", return_value=[FileChoice(B)]), patch(
        "dirclip.selection.checkbox_prompt.sys"
    ) as mock_sys:
        mock_sys.stdin.isatty.return_value = True
        mock_sys.stdout.isatty.return_value = True
        from dirclip.selection.checkbox_prompt import checkbox

        assert select_files([A, B], prompt=checkbox) == [B]
