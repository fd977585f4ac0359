"""Leaf file discovered during traversal."""

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class FileEntry:
    """A single non-directory entry found under the traversal root.

    Attributes:
        path: Absolute path to the file.
        relative_path: Path relative to the traversal root, "/"-separated. Used for display
            and for the header lines of the aggregated payload.

    Example:
        >>> entry = FileEntry(Path("/proj/src/app.js"), "src/app.js")
        >>> entry.depth
        1
        >>> entry.name
        'app.js'
        >>> str(entry)
        'src/app.js'
    """

    path: Path
    relative_path: str

    @property
    def name(self) -> str:
        return self.path.name

    @property
    def depth(self) -> int:
        """Number of directories between the root and this file."""
        return self.relative_path.count("/")

    def __str__(self) -> str:
        return self.relative_path
