"""Command-line argument parsing for fstree.

This module defines the command-line interface for fstree,
handling argument parsing and validation.
"""

import argparse
from pathlib import Path

from fstree import __version__


def non_negative_int(value: str) -> int:
    """Parse a display depth, rejecting anything that is not an integer >= 0.

    Raises:
        argparse.ArgumentTypeError: If value is not a non-negative integer.
    """
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid depth: {value!r} is not an integer")
    if number < 0:
        raise argparse.ArgumentTypeError(f"invalid depth: {number} is negative")
    return number


def create_parser() -> argparse.ArgumentParser:
    """Create and configure the command-line argument parser.

    Returns:
        An ArgumentParser instance configured with fstree's options.
    """
    description = """
    fstree: List the files below a directory as a tree.

    The directory is scanned recursively for regular files (symbolic links are
    skipped), the directory hierarchy is rebuilt from the file paths and printed
    as a tree, followed by the number of entries and their total size.
    """

    epilog = """
    Examples:
      # Print the whole tree
      fstree /path/to/project

      # Print only the top two levels below the directory
      fstree -m 2 /path/to/project

      # Show timings of the build and render steps
      fstree -v /path/to/project

      # Display version information and exit
      fstree -V
      fstree --version
    """

    parser = argparse.ArgumentParser(
        prog="fstree",
        description=description,
        epilog=epilog,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    # Version information
    parser.add_argument(
        "-V", "--version", action="version", version=f"fstree {__version__}", help="Show the version and exit"
    )

    parser.add_argument(
        "path",
        type=Path,
        help="The directory to scan. The tree is rooted at this directory.",
    )
    parser.add_argument(
        "-m",
        "--max",
        type=non_negative_int,
        metavar="N",
        help="Maximum number of levels below the root to display (default: no limit).",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log debug information, such as timings, to stderr.",
    )

    return parser
