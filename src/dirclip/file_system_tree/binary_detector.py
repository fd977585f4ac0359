"""Binary file detection utilities."""

from pathlib import Path

from dirclip.types import PathType

# Extensions that are binary with high confidence
BINARY_EXTENSIONS = frozenset(
    {
        # Executables and objects
        ".exe", ".dll", ".so", ".dylib", ".o", ".a", ".class", ".jar", ".pyc", ".wasm", ".bin",
        # Images
        ".jpg", ".jpeg", ".png", ".gif", ".bmp", ".tiff", ".psd", ".ico", ".webp",
        # Audio and video
        ".mp3", ".wav", ".flac", ".ogg", ".m4a", ".mp4", ".mkv", ".avi", ".mov", ".webm",
        # Archives
        ".zip", ".rar", ".7z", ".tar", ".gz", ".bz2", ".xz", ".iso",
        # Documents, fonts and databases
        ".pdf", ".docx", ".xlsx", ".pptx", ".woff", ".woff2", ".ttf", ".otf",
        ".sqlite", ".sqlite3", ".db",
    }
)  # fmt: skip

# Extensions that are text with high confidence
TEXT_EXTENSIONS = frozenset(
    {
        # Source code
        ".py", ".js", ".mjs", ".cjs", ".ts", ".tsx", ".jsx", ".vue", ".svelte",
        ".c", ".h", ".cpp", ".hpp", ".cs", ".java", ".kt", ".go", ".rs", ".rb",
        ".php", ".pl", ".swift", ".scala", ".sh", ".sql",
        # Markup and styles
        ".html", ".htm", ".css", ".scss", ".less", ".xml", ".svg",
        # Documents and config
        ".txt", ".md", ".rst", ".csv", ".tsv", ".log", ".json", ".yaml", ".yml",
        ".toml", ".ini", ".cfg", ".conf", ".properties",
    }
)  # fmt: skip

# Share of control bytes above which a sample is treated as binary
CONTROL_CHAR_THRESHOLD = 0.01


def is_binary_file(file_path: PathType, chunk_size: int = 8192) -> bool:
    """Detect if a file is binary using extension hints and a content sample.

    The extension is checked first. For unknown extensions the first `chunk_size`
    bytes are inspected: a null byte means binary, a sample that is not valid UTF-8
    text means binary, and so does a sample where more than 1% of the
    bytes are control characters other than tab, newline and carriage return.

    Args:
        file_path: Path to the file to analyze.
        chunk_size: Number of bytes to sample. Defaults to 8192.

    Returns:
        True if the file appears to be binary, False if it appears to be text.

    Raises:
        OSError: If the file cannot be read.

    Example:
        >>> is_binary_file("README.md")
        False
        >>> is_binary_file("logo.PNG")
        True
    """
    path_obj = Path(file_path)
    extension = path_obj.suffix.lower()

    if extension in BINARY_EXTENSIONS:
        return True
    if extension in TEXT_EXTENSIONS:
        return False

    with open(path_obj, "rb") as file:
        chunk = file.read(chunk_size)

    if not chunk:
        return False
    if b"\0" in chunk:
        return True

    try:
        chunk.decode("utf-8")
    except UnicodeDecodeError as e:
        # A multi-byte character cut off at the end of the sample is still text
        if e.start < len(chunk) - 3:
            return True

    control_chars = sum(1 for byte in chunk if byte < 32 and byte not in (9, 10, 13))
    return control_chars / len(chunk) > CONTROL_CHAR_THRESHOLD
