"""Command-line interface for fstree.

This module provides the command-line interface for fstree, which scans a
directory for regular files, rebuilds the directory hierarchy from their paths and
prints it as a tree with a summary of the entry count and total size.

Key Features:
    - Recursive scan that skips symbolic links
    - Tree output anchored at the scanned directory
    - Optional display depth limit
    - Warnings for unreadable files and directories, without aborting the scan

Exit Codes:
    0: Successful completion, including scans where some subdirectories were unreadable
    1: Runtime error, such as a missing, non-directory or unreadable root, or no tree to print
    2: Command-line syntax error
    130: Interrupted by SIGINT (Ctrl+C)
    141: Broken pipe (output closed early, e.g. when piping to `head`)

Example:
    # Print the tree of a directory
    $ fstree /path/to/dir

    # Limit the tree to two levels below the directory
    $ fstree -m 2 /path/to/dir
"""

import logging
import os
import sys

from fstree.cli.argparser import create_parser
from fstree.exceptions import NoCommonRootError, RootNodeMissingError, ScanError
from fstree.file_system.file_system import FileSystem
from fstree.file_system.scanner import DirectoryScanner
from fstree.tree.assembly import render_tree


def configure_logging(verbose: bool) -> None:
    """Send log records to stderr, at DEBUG level when verbose and WARNING otherwise."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s: %(name)s: %(message)s",
        stream=sys.stderr,
    )


def report_scan_error(error: ScanError) -> None:
    print(f"Warning: {error}", file=sys.stderr)


def write_output(text: str) -> bool:
    """Write text to stdout.

    Returns:
        False if stdout was closed by the reader before everything was written.
    """
    try:
        sys.stdout.write(text + "\n")
        sys.stdout.flush()
    except BrokenPipeError:
        # Keep the interpreter from failing again while flushing stdout at exit
        devnull = os.open(os.devnull, os.O_WRONLY)
        os.dup2(devnull, sys.stdout.fileno())
        return False
    return True


def main() -> None:
    """Main entry point for the fstree command-line interface.

    Exit codes:
        0: Successful completion
        1: Runtime error during execution
        2: Command-line syntax error
        130: Interrupted by SIGINT (Ctrl+C)
        141: Broken pipe
    """
    parser = create_parser()
    # argparse calls sys.exit(2) for argument errors or sys.exit(0) for --version
    args = parser.parse_args()
    configure_logging(args.verbose)

    try:
        scanner = DirectoryScanner(args.path, on_error=report_scan_error)
        file_system = FileSystem.from_entries(scanner.iter_entries(), root=scanner.root)
        if scanner.root_unreadable:
            print(f"Error: Cannot read root directory: {scanner.root}", file=sys.stderr)
            sys.exit(1)

        output = render_tree(file_system, max_level=args.max)
        if not write_output(output):
            sys.exit(141)

    except (NoCommonRootError, RootNodeMissingError) as e:
        print(str(e), file=sys.stderr)
        sys.exit(1)
    except KeyboardInterrupt:
        sys.exit(130)
    except Exception as e:
        print(f"Error: {str(e)}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
