"""Directory tree printing and clipboard collection utilities.

This package prints a tree view of a directory and lets the user pick files
whose contents are concatenated and copied to the system clipboard, e.g. for
pasting source snippets into a chat or a document.
"""

from importlib.metadata import PackageNotFoundError, version

# Expose the version for both programmatic use and CLI
try:
    __version__ = version("dirclip")
except PackageNotFoundError:
    __version__ = "unknown"
