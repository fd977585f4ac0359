"""System clipboard access."""

import pyperclip

from dirclip.exceptions import ClipboardUnavailableError


def write_clipboard(text: str) -> None:
    """Replace the system clipboard content with text.

    Raises:
        ClipboardUnavailableError: If no clipboard mechanism is available on this host or the
            write fails.
    """
    try:
        pyperclip.copy(text)
    except pyperclip.PyperclipException as e:
        raise ClipboardUnavailableError(str(e)) from e
