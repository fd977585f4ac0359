"""Unit tests for FileSystemNode and FileEntry."""

from pathlib import Path

from anytree import PreOrderIter

from dirclip.file_system_tree.file_entry import FileEntry
from dirclip.file_system_tree.file_system_node import FileSystemNode


def test_file_node_defaults():
    node = FileSystemNode("file.txt")
    assert not node.is_dir
    assert node.is_file
    assert not node.is_symlink
    assert node.symlink_target is None
    assert node.children == ()
    assert node.parent is None


def test_directory_node_is_traversable():
    node = FileSystemNode("src", is_dir=True)
    assert node.is_traversable
    assert not node.is_file


def test_symlinked_directory_is_not_traversable():
    node = FileSystemNode("build", is_dir=True, is_symlink=True, symlink_target="src")
    assert not node.is_traversable
    assert not node.is_file


def test_symlinked_file_is_a_file():
    node = FileSystemNode("link.txt", is_symlink=True, symlink_target="real.txt")
    assert node.is_file


def test_children_keep_attachment_order():
    root = FileSystemNode("root", is_dir=True)
    a = FileSystemNode("a", parent=root, is_dir=True)
    FileSystemNode("a1", parent=a)
    FileSystemNode("a2", parent=a)
    FileSystemNode("b", parent=root)
    assert [child.name for child in root.children] == ["a", "b"]
    assert [node.name for node in PreOrderIter(root)] == ["root", "a", "a1", "a2", "b"]


def test_relative_path_omits_root_name():
    root = FileSystemNode("project", is_dir=True)
    src = FileSystemNode("src", parent=root, is_dir=True)
    util = FileSystemNode("util", parent=src, is_dir=True)
    helpers = FileSystemNode("helpers.py", parent=util)
    assert helpers.relative_path == "src/util/helpers.py"
    assert src.relative_path == "src"
    assert root.relative_path == ""


def test_file_entry_properties():
    entry = FileEntry(Path("/proj/src/util/helpers.py"), "src/util/helpers.py")
    assert entry.name == "helpers.py"
    assert entry.depth == 2
    assert str(entry) == "src/util/helpers.py"


def test_top_level_file_entry_has_depth_zero():
    assert FileEntry(Path("/proj/a.js"), "a.js").depth == 0


def test_file_entries_compare_by_value():
    assert FileEntry(Path("/p/a.js"), "a.js") == FileEntry(Path("/p/a.js"), "a.js")
    assert len({FileEntry(Path("/p/a.js"), "a.js"), FileEntry(Path("/p/a.js"), "a.js")}) == 1
