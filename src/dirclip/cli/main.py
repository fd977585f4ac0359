"""Command-line interface for dirclip.

This module provides the command-line interface for dirclip. It always prints the
tree of the current working directory; in copy mode it then asks which files to
copy, concatenates them and writes the result to the system clipboard.

Signal Handling Notes:
    - SIGPIPE: Handled when output pipe is closed (e.g., when piping to `head`) on Unix-like systems
    - SIGINT: Handled for clean exit on Ctrl+C
    The clipboard is never written once either signal has been received.

Exit Codes:
    0: Successful completion, including an empty selection
    1: Runtime error during execution
    2: Command-line syntax error
    126: Permission denied
    130: Interrupted by SIGINT (Ctrl+C) or selection cancelled
    141: Broken pipe (SIGPIPE) on Unix-like systems

Example:
    # Print the tree of the current directory
    $ dirclip

    # Choose files and copy them, skipping dist instead of the default names
    $ dirclip -c -e dist
"""

import argparse
import os
import sys
from typing import Optional, Sequence

from dirclip.cli.argparser import create_exclusion_rules, parse_args
from dirclip.cli.safe_writer import SafeWriter
from dirclip.cli.signal_handler import setup_signal_handling, signal_handler
from dirclip.clipboard import write_clipboard
from dirclip.content_aggregator import AggregatedPayload, ContentAggregator
from dirclip.exceptions import (
    BrokenSymlinkError,
    ClipboardUnavailableError,
    SelectionCancelledError,
    TokenizerNotAvailableError,
)
from dirclip.file_system_tree.binary_action import BinaryAction
from dirclip.file_system_tree.file_system_tree import FileSystemTree
from dirclip.file_system_tree.permission_action import PermissionAction
from dirclip.selection.controller import select_files
from dirclip.token_counter import check_tiktoken_available

NO_FILES_WARNING = "Warning: No files selected."
NO_READABLE_FILES_WARNING = "Warning: None of the selected files could be read as text. Clipboard left unchanged."


def format_counts(payload: AggregatedPayload) -> str:
    """Format the payload metrics into a human-readable string.

    Example:
        >>> print(format_counts(AggregatedPayload("x", (), lines=3, characters=40)))
        Lines: 3
        Characters: 40
    """
    result = [f"Lines: {payload.lines}", f"Characters: {payload.characters}"]
    if payload.tokens is not None:
        result.insert(1, f"Tokens: {payload.tokens}")
    return "\n".join(result)


def print_tree(tree: FileSystemTree, args: argparse.Namespace) -> None:
    """Print the root header and tree lines, then any skipped directories.

    Output stops quietly if the pipe is closed or the process is interrupted.
    """
    with SafeWriter() as safe_writer:
        try:
            for line in tree.stream_tree_representation(include_root=True):
                safe_writer.write_line(line)
        except BrokenPipeError:
            return

    if args.permission_action == "warn":
        for relative_path, message in tree.inaccessible_paths:
            print(f"Warning: Skipped {relative_path}: {message}", file=sys.stderr)


def copy_selection(tree: FileSystemTree, args: argparse.Namespace) -> None:
    """Run the interactive part: select, aggregate, write the clipboard and report.

    Raises:
        SelectionCancelledError: If the user cancels the prompt.
        ClipboardUnavailableError: If the clipboard cannot be written and no fallback applies.
        BinaryFileError: If a selected file is not text and --binary-action is fail.
    """
    selected = select_files(list(tree.iterate_files()), require_selection=args.require_selection)
    if not selected:
        print(NO_FILES_WARNING)
        return

    binary_action = BinaryAction.RAISE if args.binary_action == "fail" else BinaryAction.IGNORE
    payload = ContentAggregator(binary_action=binary_action, tokenizer_model=args.tokenizer).aggregate(selected)

    for _, reason in payload.skipped:
        if isinstance(reason, BrokenSymlinkError) or args.binary_action == "warn":
            print(f"Warning: {reason} (skipped)", file=sys.stderr)

    if payload.file_count == 0:
        print(NO_READABLE_FILES_WARNING)
        return

    if signal_handler.interrupted:
        return

    try:
        write_clipboard(payload.text)
    except ClipboardUnavailableError as e:
        print(f"Error: {str(e)}", file=sys.stderr)
        if args.stdout_fallback:
            print("Printing the collected content to stdout instead.", file=sys.stderr)
            sys.stdout.write(payload.text)
            sys.stdout.flush()
        sys.exit(1)

    print(f"Content of {payload.file_count} file(s) copied to clipboard!")
    print(format_counts(payload))


def main(argv: Optional[Sequence[str]] = None) -> None:
    """Main entry point for the dirclip command-line interface.

    Args:
        argv: Arguments to parse instead of sys.argv[1:]. Unknown arguments are ignored.

    Exit codes:
        0: Successful completion
        1: Runtime error during execution
        2: Command-line syntax error
        126: Permission denied
        130: Interrupted by SIGINT (Ctrl+C) or selection cancelled
        141: Broken pipe (SIGPIPE) on Unix-like systems
    """
    setup_signal_handling()

    try:
        args, _ = parse_args(argv)

        # Check if tokenizer is requested but tiktoken is not available
        if args.copy and args.tokenizer and not check_tiktoken_available():
            raise TokenizerNotAvailableError(
                "Token counting was requested with -t/--tokenizer, but the required tiktoken library is not installed."
            )

        # Map CLI permission actions to internal enum
        perm_action = {
            "ignore": PermissionAction.IGNORE,
            "warn": PermissionAction.IGNORE,
            "fail": PermissionAction.RAISE,
        }[args.permission_action]

        tree = FileSystemTree(os.getcwd(), create_exclusion_rules(args.exclude), permission_action=perm_action)

        try:
            print_tree(tree, args)
            if args.copy and not signal_handler.interrupted:
                copy_selection(tree, args)
        except PermissionError as e:
            print(f"Error: {str(e)}", file=sys.stderr)
            sys.exit(126)

    except SelectionCancelledError:
        print("Cancelled.", file=sys.stderr)
        sys.exit(130)
    except TokenizerNotAvailableError as e:
        print(f"Error: {str(e)}", file=sys.stderr)
        sys.exit(1)
    except Exception as e:
        print(f"Error: {str(e)}", file=sys.stderr)
        sys.exit(1)

    # Handle exit codes based on received signals
    if signal_handler.sigpipe_received.is_set():
        sys.exit(141)
    elif signal_handler.sigint_received.is_set():
        sys.exit(130)


if __name__ == "__main__":
    main()
