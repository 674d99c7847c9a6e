"""Directory hierarchy reconstruction and tree printing.

This package rebuilds the directory tree implied by a flat collection of file
paths, either scanned from disk or supplied as strings, and prints it as a
text tree.
"""

from importlib.metadata import PackageNotFoundError, version

# Expose the version for both programmatic use and CLI
try:
    __version__ = version("fstree")
except PackageNotFoundError:
    __version__ = "unknown"
