"""Icons shown next to files in the selection list."""

from typing import Dict

from dirclip.types import PathType

DEFAULT_ICON = "📄"

# Keys are lowercase extensions including the dot
EXTENSION_ICONS: Dict[str, str] = {
    ".py": "🐍",
    ".js": "📜",
    ".mjs": "📜",
    ".cjs": "📜",
    ".jsx": "⚛️",
    ".ts": "🔷",
    ".tsx": "⚛️",
    ".json": "🔧",
    ".yml": "🔧",
    ".yaml": "🔧",
    ".toml": "🔧",
    ".ini": "🔧",
    ".cfg": "🔧",
    ".html": "🌐",
    ".htm": "🌐",
    ".css": "🎨",
    ".scss": "🎨",
    ".less": "🎨",
    ".md": "📝",
    ".txt": "📝",
    ".rst": "📝",
    ".sh": "💻",
    ".bat": "💻",
    ".ps1": "💻",
    ".sql": "🗄️",
    ".csv": "📊",
    ".png": "🖼️",
    ".jpg": "🖼️",
    ".jpeg": "🖼️",
    ".gif": "🖼️",
    ".svg": "🖼️",
    ".lock": "🔒",
}


def icon_for(path: PathType) -> str:
    """Return the icon for a file based on its extension, case-insensitively.

    Files without an extension, including dotfiles such as ".gitignore", get the
    default icon.

    Example:
        >>> icon_for("src/App.PY")
        '🐍'
        >>> icon_for("Makefile") == DEFAULT_ICON
        True
    """
    name = str(path).replace("\\", "/").rsplit("/", 1)[-1]
    stem, dot, extension = name.rpartition(".")
    if not dot or not stem:
        return DEFAULT_ICON
    return EXTENSION_ICONS.get(f".{extension.lower()}", DEFAULT_ICON)
