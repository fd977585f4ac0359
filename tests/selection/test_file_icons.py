"""Unit tests for file icons."""

import pytest

from dirclip.selection.file_icons import DEFAULT_ICON, EXTENSION_ICONS, icon_for


@pytest.mark.parametrize(
    "path,icon",
    [
        ("main.py", "🐍"),
        ("src/App.PY", "🐍"),
        ("index.js", "📜"),
        ("README.md", "📝"),
        ("package.json", "🔧"),
        ("archive.tar.gz", DEFAULT_ICON),
    ],
)
def test_known_and_unknown_extensions(path, icon):
    assert icon_for(path) == icon


@pytest.mark.parametrize("path", ["Makefile", ".gitignore", "dir/.env", "LICENSE"])
def test_files_without_extension_get_default_icon(path):
    assert icon_for(path) == DEFAULT_ICON


def test_windows_separators():
    assert icon_for("src\\main.py") == "🐍"


def test_extension_keys_are_lowercase():
    assert all(key == key.lower() and key.startswith(".") for key in EXTENSION_ICONS)
