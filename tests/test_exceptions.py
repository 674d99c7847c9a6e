"""Tests for custom exceptions."""

from fstree.exceptions import (
    EdgeError,
    FsTreeError,
    InvalidInputError,
    NoCommonRootError,
    RootNodeMissingError,
    ScanError,
)


class TestScanError:
    """Test ScanError exception."""

    def test_scan_error_with_os_error(self):
        """Test the message uses the strerror of the underlying error."""
        cause = PermissionError(13, "Permission denied")
        error = ScanError("/data/private", cause)

        assert error.path == "/data/private"
        assert error.cause is cause
        assert str(error) == "Error reading /data/private (Permission denied)"

    def test_scan_error_without_strerror(self):
        """Test falling back to the string form of the cause."""
        error = ScanError("/data/x", OSError("vanished"))
        assert str(error) == "Error reading /data/x (vanished)"

    def test_scan_error_without_cause(self):
        error = ScanError("/data/x")
        assert error.cause is None
        assert "unknown error" in str(error)


class TestTreeErrors:
    """Test the errors raised while building and rendering trees."""

    def test_no_common_root_error_default_message(self):
        assert str(NoCommonRootError()) == "No root for printing as tree!"

    def test_root_node_missing_error(self):
        error = RootNodeMissingError("/srv")
        assert error.root == "/srv"
        assert "Root node not found!" in str(error)

    def test_edge_error_attributes(self):
        error = EdgeError("/a", "/a/b", "unknown parent node")
        assert error.parent_key == "/a"
        assert error.child_key == "/a/b"
        assert error.reason == "unknown parent node"
        assert str(error) == "Cannot add edge /a -> /a/b: unknown parent node"

    def test_invalid_input_error_is_value_error(self):
        assert issubclass(InvalidInputError, ValueError)


def test_all_errors_share_base_class():
    """Test that every fstree error can be caught as FsTreeError."""
    for error_class in (InvalidInputError, NoCommonRootError, RootNodeMissingError, EdgeError, ScanError):
        assert issubclass(error_class, FsTreeError)
