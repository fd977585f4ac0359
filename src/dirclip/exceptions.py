from typing import Optional


class TokenizerNotAvailableError(Exception):
    """
    Exception raised when attempting to use token counting functionality without the required tokenizer package.

    This exception is raised when the `tiktoken` package is not installed but token counting
    functionality is requested. The tiktoken package is an optional dependency that must be
    explicitly installed using the 'token_counting' extra.

    Attributes:
        message (str): Detailed error message including installation instructions.

    Example:
        >>> error = TokenizerNotAvailableError()
        >>> str(error).startswith('Tokenizer (tiktoken) is not installed')
        True
    """

    def __init__(self, message: str = "Tokenizer (tiktoken) is not installed.") -> None:
        """
        Initialize the exception with an informative error message.

        Args:
            message (str, optional): Base error message. Defaults to "Tokenizer (tiktoken) is not installed."
                Installation instructions will be appended to this message.
        """
        self.message = (
            f"{message} To enable token counting, install dirclip with the 'token_counting' "
            "extra: 'pip install dirclip[token_counting]'."
        )
        super().__init__(self.message)


class TokenizationError(Exception):
    """
    Exception raised when token counting fails during execution.

    Example:
        >>> error = TokenizationError("Failed to tokenize: invalid input")
        >>> str(error)
        'Failed to tokenize: invalid input'
    """

    pass


class BinaryFileError(Exception):
    """
    Exception raised when a selected file is binary or cannot be decoded as text.

    Raised by the content aggregator when its binary action is RAISE. Files that
    look like text but fail to decode under the configured encoding are reported
    through the same exception, with the decoding failure as the detail.

    Attributes:
        file_path (str): Path to the offending file.
        detail (Optional[str]): Why the file was rejected, if more specific than "binary".

    Example:
        >>> error = BinaryFileError("/path/to/binary.dat")
        >>> str(error)
        'Binary file detected: /path/to/binary.dat'
        >>> str(BinaryFileError("notes.txt", "invalid start byte"))
        'Cannot decode file as text: notes.txt (invalid start byte)'
    """

    def __init__(self, file_path: str, detail: Optional[str] = None) -> None:
        self.file_path = file_path
        self.detail = detail
        if detail is None:
            super().__init__(f"Binary file detected: {file_path}")
        else:
            super().__init__(f"Cannot decode file as text: {file_path} ({detail})")


class BrokenSymlinkError(Exception):
    """
    Exception raised for a selected symbolic link whose target does not exist.

    Example:
        >>> str(BrokenSymlinkError("docs/latest", "../build/docs"))
        'Broken symlink: docs/latest → ../build/docs'
        >>> str(BrokenSymlinkError("docs/latest"))
        'Broken symlink: docs/latest'
    """

    def __init__(self, file_path: str, target: Optional[str] = None) -> None:
        self.file_path = file_path
        self.target = target
        if target is None:
            super().__init__(f"Broken symlink: {file_path}")
        else:
            super().__init__(f"Broken symlink: {file_path} → {target}")


class ClipboardUnavailableError(Exception):
    """
    Exception raised when the system clipboard cannot be written.

    Typically this means no copy/paste mechanism is available on the host (for example
    a headless Linux machine without xclip, xsel or wl-clipboard).

    Example:
        >>> str(ClipboardUnavailableError("no copy mechanism"))
        'Clipboard is not available: no copy mechanism'
    """

    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__(f"Clipboard is not available: {reason}")


class SelectionCancelledError(Exception):
    """Exception raised when the user aborts the interactive file selection."""

    pass


class PromptUnavailableError(Exception):
    """
    Exception raised when the interactive selection prompt cannot run.

    Example:
        >>> str(PromptUnavailableError("interactive selection requires a terminal"))
        'Interactive prompt unavailable: interactive selection requires a terminal'
    """

    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__(f"Interactive prompt unavailable: {reason}")
