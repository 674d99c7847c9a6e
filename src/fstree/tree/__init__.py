"""Tree representation and rendering of an entry collection.

This package wraps anytree nodes around entries, links them by parent path and
renders the result as an indented text tree.
"""
