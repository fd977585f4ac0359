"""Node representation for file system elements in the tree."""

from typing import Optional

from anytree import Node


class FileSystemNode(Node):  # type: ignore
    """Node class representing a file or directory in the filesystem tree.

    Extends anytree.Node with flags describing the entry. Children keep the order in
    which they were attached, which is the sorted listing order used by both the tree
    renderer and the file collector.

    Attributes:
        name (str): The name of the file or directory (just the basename).
        parent (Optional[FileSystemNode]): The parent node in the tree.
        is_dir (bool): True if the entry is a directory (symlinks are resolved for this check).
        is_symlink (bool): True if this node represents a symbolic link.
        symlink_target (Optional[str]): Target path of the symlink, if this is a symlink.
        children (tuple[FileSystemNode]): The child nodes (inherited from anytree.Node).

    Example:
        >>> root = FileSystemNode("root", is_dir=True)
        >>> child = FileSystemNode("file.txt", parent=root)
        >>> root.is_traversable, child.is_traversable
        (True, False)
        >>> child.is_file
        True
    """

    def __init__(
        self,
        name: str,
        parent: Optional["FileSystemNode"] = None,
        is_dir: bool = False,
        is_symlink: bool = False,
        symlink_target: Optional[str] = None,
    ) -> None:
        super().__init__(name, parent)
        self.is_dir = is_dir
        self.is_symlink = is_symlink
        self.symlink_target = symlink_target

    @property
    def is_traversable(self) -> bool:
        """True for real directories. Symlinked directories are never descended into."""
        return self.is_dir and not self.is_symlink

    @property
    def is_file(self) -> bool:
        """True for anything the file collector emits: every non-directory entry."""
        return not self.is_dir

    @property
    def relative_path(self) -> str:
        """Path from the root node, "/"-separated and without the root's own name.

        Example:
            >>> root = FileSystemNode("root", is_dir=True)
            >>> src = FileSystemNode("src", parent=root, is_dir=True)
            >>> FileSystemNode("main.py", parent=src).relative_path
            'src/main.py'
        """
        return "/".join(node.name for node in self.path[1:])
