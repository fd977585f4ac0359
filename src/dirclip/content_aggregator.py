"""Concatenation of selected file contents into a single clipboard payload.

Each selected file contributes one block: a header line naming the file, the
file's content verbatim, and a blank line:

    // ----- src/app.js -----
    <content of src/app.js>

Blocks appear in selection order. Files are read as text with newline
translation disabled, so the body of each block is exactly the file content.
"""

import os
from dataclasses import dataclass
from typing import Iterable, List, Optional, Tuple

from .exceptions import BinaryFileError, BrokenSymlinkError
from .file_system_tree.binary_action import BinaryAction
from .file_system_tree.binary_detector import is_binary_file
from .file_system_tree.file_entry import FileEntry
from .token_counter import TokenCounter

HEADER_TEMPLATE = "// ----- {path} -----\n"
BLOCK_SEPARATOR = "\n\n"


def format_header(relative_path: str) -> str:
    """Return the header line that introduces a file's block.

    Example:
        >>> format_header("x.js")
        '// ----- x.js -----\\n'
    """
    return HEADER_TEMPLATE.format(path=relative_path)


@dataclass(frozen=True)
class AggregatedPayload:
    """Result of aggregating a selection of files.

    Attributes:
        text: The concatenated blocks, ready to be written to the clipboard.
        files: Files included in text, in order.
        skipped: Files left out, each with the exception explaining why: BinaryFileError for
            binary or undecodable files, BrokenSymlinkError for links to missing targets.
        lines: Number of newlines in text.
        characters: Number of characters in text.
        tokens: Number of tokens in text, or None if token counting was not requested.
    """

    text: str
    files: Tuple[FileEntry, ...]
    skipped: Tuple[Tuple[FileEntry, Exception], ...] = ()
    lines: int = 0
    characters: int = 0
    tokens: Optional[int] = None

    @property
    def file_count(self) -> int:
        return len(self.files)


class ContentAggregator:
    """Reads selected files and concatenates them with per-file header lines.

    Attributes:
        binary_action (BinaryAction): What to do with binary or undecodable files.
        encoding (str): Encoding used to decode file contents.
        counter (TokenCounter): Counter fed with every piece of the payload.

    Example:
        >>> aggregator = ContentAggregator()  # doctest: +SKIP
        >>> payload = aggregator.aggregate(entries)  # doctest: +SKIP
        >>> print(payload.text)  # doctest: +SKIP
        // ----- x.js -----
        1
    """

    def __init__(
        self,
        binary_action: BinaryAction = BinaryAction.IGNORE,
        tokenizer_model: Optional[str] = None,
        encoding: str = "utf-8",
    ) -> None:
        self.binary_action = binary_action
        self.encoding = encoding
        self.counter = TokenCounter(model=tokenizer_model)

    def _read_content(self, entry: FileEntry) -> str:
        """Read a whole file as text.

        Raises:
            BrokenSymlinkError: If the entry is a symlink whose target does not exist.
            BinaryFileError: If the file is binary or cannot be decoded.
            PermissionError: If the file cannot be opened for lack of permission.
            OSError: For any other read failure.
        """
        if entry.path.is_symlink() and not entry.path.exists():
            try:
                target: Optional[str] = os.readlink(entry.path)
            except OSError:
                target = None
            raise BrokenSymlinkError(entry.relative_path, target)

        try:
            if is_binary_file(entry.path):
                raise BinaryFileError(entry.relative_path)

            with open(entry.path, "r", encoding=self.encoding, errors="strict", newline="") as file:
                return file.read()
        except UnicodeDecodeError as e:
            raise BinaryFileError(entry.relative_path, f"{self.encoding}: {e.reason}") from e
        except PermissionError as e:
            raise PermissionError(f"Failed to read '{entry.relative_path}': {str(e)}") from e
        except OSError as e:
            raise OSError(f"Failed to read '{entry.relative_path}': {str(e)}") from e

    def aggregate(self, selected: Iterable[FileEntry]) -> AggregatedPayload:
        """Build the payload for the selected files, preserving their order.

        Args:
            selected: Files to include, in the order they should appear.

        Returns:
            AggregatedPayload with the text and its metrics.

        Raises:
            BinaryFileError: If a file is binary or undecodable and binary_action is RAISE.
            PermissionError: If a file cannot be read for lack of permission.
            OSError: If a file cannot be read for any other reason.
            TokenizationError: If token counting is enabled and fails.
        """
        self.counter.reset_counts()
        blocks: List[str] = []
        included: List[FileEntry] = []
        skipped: List[Tuple[FileEntry, Exception]] = []

        for entry in selected:
            try:
                content = self._read_content(entry)
            except BinaryFileError as e:
                if self.binary_action == BinaryAction.RAISE:
                    raise
                skipped.append((entry, e))
                continue
            except BrokenSymlinkError as e:
                # Nothing to read, whatever the binary action
                skipped.append((entry, e))
                continue

            block = format_header(entry.relative_path) + content + BLOCK_SEPARATOR
            self.counter.count(block)
            blocks.append(block)
            included.append(entry)

        return AggregatedPayload(
            text="".join(blocks),
            files=tuple(included),
            skipped=tuple(skipped),
            lines=self.counter.get_total_lines(),
            characters=self.counter.get_total_characters(),
            tokens=self.counter.get_total_tokens(),
        )


def aggregate(
    selected: Iterable[FileEntry],
    *,
    binary_action: BinaryAction = BinaryAction.IGNORE,
    tokenizer_model: Optional[str] = None,
) -> AggregatedPayload:
    """Aggregate the selected files with a one-off ContentAggregator."""
    return ContentAggregator(binary_action=binary_action, tokenizer_model=tokenizer_model).aggregate(selected)
