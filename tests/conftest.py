"""Test configuration and fixtures for fstree."""

import pytest


@pytest.fixture
def project_tree(tmp_path):
    """Create a small project directory three levels deep.

    project/
    ├── docs/
    │   └── index.md
    ├── src/
    │   ├── main.py
    │   └── utils/
    │       └── helpers.py
    └── README.md
    """
    root = tmp_path / "project"
    (root / "src" / "utils").mkdir(parents=True)
    (root / "docs").mkdir()
    (root / "README.md").write_text("# Project\n")
    (root / "src" / "main.py").write_text("def main():\n    pass\n")
    (root / "src" / "utils" / "helpers.py").write_text("def helper():\n    pass\n")
    (root / "docs" / "index.md").write_text("Documentation\n")
    return root
