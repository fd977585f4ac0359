"""File system tree representation with configurable exclusion rules.

This module provides the main FileSystemTree class, which walks a directory once
and serves two views of the result: the rendered tree lines and the flat list of
files. Both views come from the same in-memory tree, so they always agree on
which entries are visible.
"""

import os
import posixpath
from pathlib import Path
from typing import Iterator, List, Optional, Tuple

from anytree import PreOrderIter

from dirclip.exclusion_rules.base_rules import BaseExclusionRules
from dirclip.file_system_tree.file_entry import FileEntry
from dirclip.file_system_tree.file_system_node import FileSystemNode
from dirclip.file_system_tree.permission_action import PermissionAction
from dirclip.types import PathType

LAST_CONNECTOR = "└── "
TEE_CONNECTOR = "├── "
LAST_PADDING = "    "
TEE_PADDING = "│   "


class FileSystemTree:
    """A tree representation of a directory structure with support for exclusion rules.

    The tree is built lazily on first access with a depth-first walk. Entries of each
    directory are visited in sorted name order, and any entry rejected by the exclusion
    rules is dropped together with its whole subtree.

    Symbolic Link Behavior:
        Symbolic links are never followed. A link is kept as a leaf node that records its
        target; a link pointing at a directory counts as a directory entry (it is neither
        descended into nor reported as a file), any other link counts as a file.

    Permission Handling:
        Directories that cannot be listed are handled according to permission_action:
        - RAISE (default): raise PermissionError (or OSError) immediately
        - IGNORE: keep the directory as an empty node and record the failure in
          `inaccessible_paths`

    Attributes:
        root_path (Path): The absolute path to the root directory.
        exclusion_rules (Optional[BaseExclusionRules]): Rules for excluding files/directories.
        permission_action (PermissionAction): How to handle access errors.

    Example:
        >>> tree = FileSystemTree(".")  # doctest: +SKIP
        >>> print("\n".join(tree.stream_tree_representation()))  # doctest: +SKIP
        ├── file1.txt
        └── subdir
            └── file2.txt
    """

    def __init__(
        self,
        root_path: PathType,
        exclusion_rules: Optional[BaseExclusionRules] = None,
        permission_action: PermissionAction = PermissionAction.RAISE,
    ) -> None:
        self.root_path = Path(root_path).absolute()
        self.exclusion_rules = exclusion_rules
        self.permission_action = permission_action
        self._tree: Optional[FileSystemNode] = None
        self._inaccessible: List[Tuple[str, str]] = []

    def get_tree(self) -> FileSystemNode:
        """Get the root node of the filesystem tree, building it on first access.

        Raises:
            FileNotFoundError: If the root path doesn't exist.
            NotADirectoryError: If the root path isn't a directory.
            PermissionError: If access is denied and permission_action is RAISE.
        """
        if self._tree is None:
            self._build_tree()
        assert self._tree is not None
        return self._tree

    @property
    def inaccessible_paths(self) -> List[Tuple[str, str]]:
        """Pairs of (relative_path, error message) for directories that could not be listed.

        Only populated when permission_action is IGNORE.
        """
        self.get_tree()
        return list(self._inaccessible)

    def _build_tree(self) -> None:
        if not self.root_path.exists():
            raise FileNotFoundError(f"Root path does not exist: {self.root_path}")
        if not self.root_path.is_dir():
            raise NotADirectoryError(f"Root path is not a directory: {self.root_path}")

        self._inaccessible = []
        root = FileSystemNode(self.root_path.name or str(self.root_path), is_dir=True)
        self._add_children(root, self.root_path, "")
        self._tree = root

    def _add_children(self, parent: FileSystemNode, path: Path, relative_path: str) -> None:
        try:
            names = sorted(os.listdir(path))
        except OSError as e:
            self._handle_access_error(relative_path or ".", e)
            return

        for name in names:
            child_relative_path = posixpath.join(relative_path, name) if relative_path else name
            if self.exclusion_rules and self.exclusion_rules.exclude(child_relative_path):
                continue
            self._create_node(parent, path / name, child_relative_path)

    def _create_node(self, parent: FileSystemNode, path: Path, relative_path: str) -> FileSystemNode:
        is_symlink = path.is_symlink()
        symlink_target = None
        if is_symlink:
            try:
                symlink_target = os.readlink(path)
            except OSError:
                # Keep the node even if the link target is unreadable
                pass

        try:
            is_dir = path.is_dir()
        except OSError:
            is_dir = False

        node = FileSystemNode(
            path.name, parent=parent, is_dir=is_dir, is_symlink=is_symlink, symlink_target=symlink_target
        )
        if node.is_traversable:
            self._add_children(node, path, relative_path)
        return node

    def _handle_access_error(self, relative_path: str, error: OSError) -> None:
        if self.permission_action == PermissionAction.RAISE:
            if isinstance(error, PermissionError):
                raise PermissionError(f"Access denied to {relative_path}: {error}") from error
            raise OSError(f"Error accessing {relative_path}: {error}") from error
        self._inaccessible.append((relative_path, str(error)))

    def iterate_files(self) -> Iterator[FileEntry]:
        """Iterate over all non-directory entries in pre-order.

        Files inside a directory appear contiguously, in the same relative order as the
        lines of the rendered tree.

        Yields:
            FileEntry for each file, with an absolute path and a root-relative path.

        Example:
            >>> tree = FileSystemTree("src")  # doctest: +SKIP
            >>> [entry.relative_path for entry in tree.iterate_files()]  # doctest: +SKIP
            ['main.py', 'utils/helpers.py']
        """
        for node in PreOrderIter(self.get_tree(), filter_=lambda n: n.is_file):
            relative_path = node.relative_path
            yield FileEntry(self.root_path / relative_path, relative_path)

    def stream_tree_representation(self, include_root: bool = False) -> Iterator[str]:
        """Generate the tree representation one line at a time.

        Each entry is printed with a connector ("├── " or "└── " for the last sibling),
        preceded by one padding block per ancestor: blank for ancestors that were the last
        of their siblings, a vertical bar otherwise. A directory's subtree is printed
        directly below it, before its next sibling.

        Args:
            include_root: Yield the absolute root path as a first header line.

        Yields:
            Lines of the tree representation, without trailing newlines.

        Example:
            >>> tree = FileSystemTree("src")  # doctest: +SKIP
            >>> for line in tree.stream_tree_representation():  # doctest: +SKIP
            ...     print(line)
            ├── main.py
            └── utils
                └── helpers.py
        """
        root = self.get_tree()
        if include_root:
            yield str(self.root_path)
        yield from self._stream_children(root, "")

    def _stream_children(self, node: FileSystemNode, prefix: str) -> Iterator[str]:
        children = node.children
        for i, child in enumerate(children):
            is_last = i == len(children) - 1
            connector = LAST_CONNECTOR if is_last else TEE_CONNECTOR

            suffix = ""
            if child.is_symlink:
                suffix = f" → {child.symlink_target} [symlink]" if child.symlink_target else " [symlink]"

            yield f"{prefix}{connector}{child.name}{suffix}"

            if child.is_traversable:
                yield from self._stream_children(child, prefix + (LAST_PADDING if is_last else TEE_PADDING))
