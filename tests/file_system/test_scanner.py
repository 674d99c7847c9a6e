"""Unit tests for the DirectoryScanner class."""

import hashlib
import os

import pytest

from fstree.exceptions import ScanError
from fstree.file_system.file_system import FileSystem
from fstree.file_system.scanner import DirectoryScanner, list_regular_files
from fstree.types import EntryKind


@pytest.fixture
def three_siblings(tmp_path):
    """Create a root with three sibling directories holding one file each."""
    for name in ("alpha", "beta", "gamma"):
        (tmp_path / name).mkdir()
        (tmp_path / name / f"{name}.txt").write_text(name)
    return tmp_path


@pytest.fixture
def deny_scandir(monkeypatch):
    """Make os.scandir fail with PermissionError for the given directories."""
    real_scandir = os.scandir
    denied = set()

    def fake_scandir(path):
        if os.fspath(path) in denied:
            raise PermissionError(13, "Permission denied", os.fspath(path))
        return real_scandir(path)

    monkeypatch.setattr(os, "scandir", fake_scandir)
    return denied


def relative(paths, root):
    return sorted(os.path.relpath(path, root) for path in paths)


def test_lists_regular_files_recursively(project_tree):
    paths = list_regular_files(project_tree)
    assert relative(paths, project_tree) == [
        "README.md",
        os.path.join("docs", "index.md"),
        os.path.join("src", "main.py"),
        os.path.join("src", "utils", "helpers.py"),
    ]


def test_root_is_made_absolute(project_tree, monkeypatch):
    monkeypatch.chdir(project_tree.parent)
    scanner = DirectoryScanner("project")
    assert os.path.isabs(scanner.root)
    assert os.path.samefile(scanner.root, project_tree)
    assert all(os.path.isabs(path) for path in scanner.iter_paths())


def test_empty_directories_are_not_listed(tmp_path):
    (tmp_path / "empty").mkdir()
    (tmp_path / "file.txt").touch()
    assert relative(list_regular_files(tmp_path), tmp_path) == ["file.txt"]


def test_files_are_visited_in_name_order(tmp_path):
    for name in ("c.txt", "a.txt", "b.txt"):
        (tmp_path / name).touch()
    assert [os.path.basename(path) for path in list_regular_files(tmp_path)] == ["a.txt", "b.txt", "c.txt"]


def test_symlinks_are_excluded(project_tree):
    """Test that symlinks to files and directories are neither listed nor followed."""
    try:
        os.symlink(project_tree / "src", project_tree / "src_link")
        os.symlink(project_tree / "README.md", project_tree / "readme_link")
    except (OSError, NotImplementedError):
        pytest.skip("Symlinks not supported on this platform")

    paths = relative(list_regular_files(project_tree), project_tree)
    assert not any("link" in path for path in paths)
    assert len(paths) == 4


def test_entries_carry_metadata(project_tree):
    scanner = DirectoryScanner(project_tree)
    entries = {entry.name: entry for entry in scanner.iter_entries()}

    readme = entries["README.md"]
    stat_info = (project_tree / "README.md").stat()
    assert readme.kind is EntryKind.FILE
    assert readme.length == len("# Project\n")
    assert readme.modified_at == stat_info.st_mtime_ns // 1_000_000
    assert readme.accessed_at is not None
    assert readme.tag is None


def test_entries_with_tags(project_tree):
    scanner = DirectoryScanner(project_tree, compute_tags=True)
    entries = {entry.name: entry for entry in scanner.iter_entries()}
    assert entries["README.md"].tag == hashlib.md5(b"# Project\n").hexdigest()


def test_unreadable_sibling_does_not_stop_scan(three_siblings, deny_scandir):
    """Test that the readable siblings are still listed when one is unreadable."""
    deny_scandir.add(str(three_siblings / "beta"))
    reported = []
    scanner = DirectoryScanner(three_siblings, on_error=reported.append)

    fs = FileSystem.from_entries(scanner.iter_entries(), root=scanner.root)

    assert str(three_siblings / "alpha" / "alpha.txt") in fs
    assert str(three_siblings / "gamma" / "gamma.txt") in fs
    assert str(three_siblings / "beta" / "beta.txt") not in fs
    assert len(scanner.errors) == 1
    assert reported == scanner.errors
    assert isinstance(scanner.errors[0], ScanError)
    assert scanner.errors[0].path == str(three_siblings / "beta")
    assert not scanner.root_unreadable


def test_unreadable_root_is_reported(three_siblings, deny_scandir):
    deny_scandir.add(str(three_siblings))
    scanner = DirectoryScanner(three_siblings)
    assert list(scanner.iter_paths()) == []
    assert scanner.root_unreadable


def test_tag_failure_keeps_entry(three_siblings, monkeypatch):
    """Test that a file that cannot be fingerprinted is kept without a tag."""

    def unreadable(path):
        raise PermissionError(13, "Permission denied", str(path))

    monkeypatch.setattr("fstree.file_system.scanner.compute_tag", unreadable)
    scanner = DirectoryScanner(three_siblings, compute_tags=True)

    entries = list(scanner.iter_entries())

    assert len(entries) == 3
    assert all(entry.tag is None for entry in entries)
    assert len(scanner.errors) == 3
    assert not scanner.root_unreadable


def test_errors_reset_between_scans(three_siblings, deny_scandir):
    deny_scandir.add(str(three_siblings / "beta"))
    scanner = DirectoryScanner(three_siblings)
    list(scanner.iter_paths())
    list(scanner.iter_paths())
    assert len(scanner.errors) == 1


def test_nonexistent_root():
    with pytest.raises(FileNotFoundError):
        list_regular_files("/non/existent/directory")


def test_file_as_root():
    with pytest.raises(NotADirectoryError):
        list_regular_files(__file__)
