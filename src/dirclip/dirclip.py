"""High-level operations behind the dirclip command.

Example:
    >>> from dirclip.dirclip import collect_files, render_tree
    >>> for line in render_tree("."):  # doctest: +SKIP
    ...     print(line)
    ├── a.js
    └── b.txt
    >>> [entry.relative_path for entry in collect_files(".")]  # doctest: +SKIP
    ['a.js', 'b.txt']
"""

from typing import Optional, Tuple

from dirclip.exclusion_rules.base_rules import BaseExclusionRules
from dirclip.exclusion_rules.name_rules import NameExclusionRules
from dirclip.file_system_tree.file_entry import FileEntry
from dirclip.file_system_tree.file_system_tree import FileSystemTree
from dirclip.file_system_tree.permission_action import PermissionAction
from dirclip.types import PathType


def _tree(
    root: PathType, exclusion_rules: Optional[BaseExclusionRules], permission_action: PermissionAction
) -> FileSystemTree:
    if exclusion_rules is None:
        exclusion_rules = NameExclusionRules()
    return FileSystemTree(root, exclusion_rules, permission_action=permission_action)


def render_tree(
    root: PathType,
    exclusion_rules: Optional[BaseExclusionRules] = None,
    permission_action: PermissionAction = PermissionAction.RAISE,
) -> Tuple[str, ...]:
    """Render the tree below root as display lines, without the root itself.

    Args:
        root: Directory to render.
        exclusion_rules: Entries to skip with their subtrees. Defaults to the default name set.
        permission_action: How to handle directories that cannot be listed.

    Raises:
        FileNotFoundError: If root does not exist.
        NotADirectoryError: If root is not a directory.
        PermissionError: If a directory cannot be listed and permission_action is RAISE.
    """
    return tuple(_tree(root, exclusion_rules, permission_action).stream_tree_representation())


def collect_files(
    root: PathType,
    exclusion_rules: Optional[BaseExclusionRules] = None,
    permission_action: PermissionAction = PermissionAction.RAISE,
) -> Tuple[FileEntry, ...]:
    """List every non-directory entry below root, in the same order as render_tree.

    Raises:
        FileNotFoundError: If root does not exist.
        NotADirectoryError: If root is not a directory.
        PermissionError: If a directory cannot be listed and permission_action is RAISE.
    """
    return tuple(_tree(root, exclusion_rules, permission_action).iterate_files())
