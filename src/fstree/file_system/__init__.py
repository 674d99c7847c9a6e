"""Entry collection, common-root resolution and directory scanning.

This package turns flat lists of paths, scanned from disk or given as strings,
into a FileSystem collection whose every entry has its parent directories present.
"""
