"""Unit tests for the clipboard sink."""

from unittest.mock import patch

import pyperclip
import pytest

from dirclip.clipboard import write_clipboard
from dirclip.exceptions import ClipboardUnavailableError


def test_write_clipboard_copies_text():
    with patch("dirclip.clipboard.pyperclip.copy") as mock_copy:
        write_clipboard("// ----- a.js -----\n1\n\n")
    mock_copy.assert_called_once_with("// ----- a.js -----\n1\n\n")


def test_write_clipboard_unavailable():
    error = pyperclip.PyperclipException("could not find a copy/paste mechanism")
    with patch("dirclip.clipboard.pyperclip.copy", side_effect=error):
        with pytest.raises(ClipboardUnavailableError, match="could not find a copy/paste mechanism") as exc_info:
            write_clipboard("text")
    assert exc_info.value.__cause__ is error


def test_other_errors_propagate():
    with patch("dirclip.clipboard.pyperclip.copy", side_effect=RuntimeError("unexpected")):
        with pytest.raises(RuntimeError, match="unexpected"):
            write_clipboard("text")
