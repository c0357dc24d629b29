"""
Pytest configuration and global fixtures.
"""
import os
import sys
from pathlib import Path

import pytest

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from mdsummary.utils.fs_utils import PathLister


class FakePathLister(PathLister):
    """In-memory PathLister: maps exact glob patterns to their matches."""
    
    def __init__(self, matches=None):
        self.matches = {
            pattern: [Path(p) for p in paths]
            for pattern, paths in (matches or {}).items()
        }
        self.patterns = []
    
    def glob(self, pattern):
        self.patterns.append(pattern)
        return list(self.matches.get(pattern, []))


@pytest.fixture(autouse=True)
def isolated_env(monkeypatch, tmp_path):
    """Run every test without MDSUMMARY_* variables or a stray .env file."""
    for key in list(os.environ):
        if key.upper().startswith("MDSUMMARY_"):
            monkeypatch.delenv(key)
    monkeypatch.chdir(tmp_path)


@pytest.fixture
def temp_dir(tmp_path):
    """Provide temporary directory for test files."""
    return tmp_path


@pytest.fixture
def fake_lister():
    """Factory for in-memory path listers."""
    return FakePathLister


@pytest.fixture
def make_doc_tree(temp_dir):
    """
    Create a documentation tree from a {relative_path: content} mapping.
    
    Returns the root directory.
    """
    def _make(files, root_name="book"):
        root = temp_dir / root_name
        root.mkdir(parents=True, exist_ok=True)
        for rel_path, content in files.items():
            file_path = root / rel_path
            file_path.parent.mkdir(parents=True, exist_ok=True)
            file_path.write_text(content, encoding="utf-8")
        return root
    
    return _make


@pytest.fixture
def sample_book(make_doc_tree):
    """Root README plus a guide/ directory without README."""
    return make_doc_tree({
        "README.md": "# Intro\n\nWelcome.\n",
        "guide/page.md": "# Page\n\nSome text.\n",
    })
