"""Command-line argument parsing for dirclip.

This module defines the command-line interface for dirclip. Parsing is lenient:
unrecognized arguments are ignored rather than reported.
"""

import argparse
import sys
from typing import List, Optional, Sequence, Tuple

from dirclip import __version__
from dirclip.exclusion_rules.name_rules import DEFAULT_EXCLUDE, NameExclusionRules, parse_exclusion_list


def create_parser() -> argparse.ArgumentParser:
    """Create and configure the command-line argument parser.

    Returns:
        An ArgumentParser instance configured with dirclip's options.
    """
    description = """
    dirclip: print a directory tree and copy selected files to the clipboard.

    Without options, the tree of the current working directory is printed. In copy
    mode the tree is printed, then a checkbox list of all files lets you choose
    which ones to copy. Their contents are concatenated, each preceded by a
    "// ----- <path> -----" header line, and placed on the system clipboard.
    """

    epilog = f"""
    Default exclusions: {", ".join(sorted(DEFAULT_EXCLUDE))}

    Examples:
      # Print the tree of the current directory
      dirclip

      # Print the tree, then choose files to copy
      dirclip -c

      # Replace the default exclusions (node_modules is no longer skipped)
      dirclip -c -e dist,.venv

      # Keep asking until at least one file is chosen
      dirclip -c -r

      # Report the token count of the copied text
      dirclip -c -t gpt-4
    """

    parser = argparse.ArgumentParser(
        prog="dirclip",
        description=description,
        epilog=epilog,
        formatter_class=argparse.RawDescriptionHelpFormatter,
        allow_abbrev=False,
        exit_on_error=False,
    )

    parser.add_argument(
        "-V", "--version", action="version", version=f"dirclip {__version__}", help="Show the version and exit"
    )
    parser.add_argument(
        "-c",
        "--copy",
        action="store_true",
        help="After printing the tree, choose files interactively and copy their contents to the clipboard.",
    )
    parser.add_argument(
        "-e",
        "--exclude",
        nargs="?",
        const=None,
        default=None,
        metavar="NAMES",
        help=(
            "Comma-separated list of literal file or directory names to skip, with their contents. "
            "Replaces the default list. Without a value the defaults are kept."
        ),
    )
    parser.add_argument(
        "-r",
        "--require-selection",
        action="store_true",
        help="Ask again instead of exiting when no file is selected.",
    )
    parser.add_argument(
        "-B",
        "--binary-action",
        choices=["ignore", "warn", "fail"],
        default="warn",
        help="How to handle selected files that are binary or not valid text (default: warn).",
    )
    parser.add_argument(
        "-P",
        "--permission-action",
        choices=["ignore", "warn", "fail"],
        default="fail",
        help="How to handle directories that cannot be read (default: fail).",
    )
    parser.add_argument(
        "-t",
        "--tokenizer",
        metavar="MODEL",
        help="Tokenizer model used to count tokens of the copied text (e.g., gpt-4). Requires tiktoken.",
    )
    parser.add_argument(
        "--stdout-fallback",
        action="store_true",
        help="Print the collected text to stdout if the clipboard cannot be written.",
    )

    return parser


def _find_flag_with_value(
    parser: argparse.ArgumentParser, args: Sequence[str], error: argparse.ArgumentError
) -> Optional[str]:
    """Find the argument that handed a value to a flag, such as "-cz" or "--copy=yes".

    Only flags (options taking no value) qualify; the offending argument is the first
    one that fails on its own with an error naming the same option.
    """
    flags = {"/".join(action.option_strings) for action in parser._actions if action.nargs == 0}
    if error.argument_name not in flags:
        return None

    for arg in args:
        if arg == "--":
            break
        if not arg.startswith("-") or ("=" not in arg and (arg.startswith("--") or len(arg) <= 2)):
            continue
        try:
            parser.parse_known_args([arg])
        except argparse.ArgumentError as e:
            if e.argument_name == error.argument_name:
                return arg
    return None


def parse_args(
    argv: Optional[Sequence[str]] = None, parser: Optional[argparse.ArgumentParser] = None
) -> Tuple[argparse.Namespace, List[str]]:
    """Parse arguments, returning the namespace and the ignored leftover arguments.

    Unrecognized arguments are ignored, and so are flags written with a value ("-cz",
    "--copy=yes"): the whole argument is dropped. Invalid values for options that do
    take one (e.g. "-B bogus") still exit with status 2.

    Example:
        >>> args, ignored = parse_args(["--copy=yes", "--frobnicate"])
        >>> args.copy, ignored
        (False, ['--copy=yes', '--frobnicate'])
    """
    if parser is None:
        parser = create_parser()
    args = list(sys.argv[1:] if argv is None else argv)
    ignored: List[str] = []

    while True:
        try:
            namespace, extras = parser.parse_known_args(args)
        except argparse.ArgumentError as e:
            arg = _find_flag_with_value(parser, args, e)
            if arg is None:
                parser.error(str(e))
            args.remove(arg)
            ignored.append(arg)
            continue
        return namespace, ignored + extras


def create_exclusion_rules(value: Optional[str]) -> NameExclusionRules:
    """Build the exclusion rules from the -e/--exclude value.

    A missing or empty value keeps the defaults; anything else replaces them.

    Example:
        >>> sorted(create_exclusion_rules(None).names)
        ['.git', '.idea', 'node_modules']
        >>> sorted(create_exclusion_rules("custom").names)
        ['custom']
    """
    if not value:
        return NameExclusionRules()
    return NameExclusionRules(parse_exclusion_list(value))
