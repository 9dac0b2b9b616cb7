"""
Shared test fixtures and configuration.
"""

from pathlib import Path

import pytest


@pytest.fixture
def content_tree(tmp_path: Path) -> Path:
    """Create a small content directory with pages, drafts, and assets."""
    root = tmp_path / "content"
    files = {
        "about.md": "# About\n",
        "_draft.md": "unfinished\n",
        "logo.png": "png",
        "blog/first-post.md": "# First\n",
        "blog/_index.md": "index\n",
        "blog/2024/recap.md": "# Recap\n",
        "blog/2024/notes.txt": "notes\n",
    }
    for rel, text in files.items():
        path = root / rel
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(text)
    return root


@pytest.fixture
def project_dir(tmp_path: Path) -> Path:
    """Return a path for a project that does not exist yet."""
    return tmp_path / "site"
