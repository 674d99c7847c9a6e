"""File input helpers.

This package reads file contents in fixed-size binary chunks, which is how the
content fingerprints of scanned files are computed.
"""
