"""File system tree representation with configurable exclusion rules.

This package provides classes for building tree representations of directory
structures, rendering them as text and flattening them into file lists, with
support for excluding files and directories based on specified rules.
"""

from .file_entry import FileEntry
from .file_system_node import FileSystemNode
from .file_system_tree import FileSystemTree
from .permission_action import PermissionAction

__all__ = ["FileEntry", "FileSystemNode", "FileSystemTree", "PermissionAction"]
