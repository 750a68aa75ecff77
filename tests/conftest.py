"""
Shared pytest fixtures for dupfinder.

- sample_tree: a/x.txt + b/y.txt (same bytes) and c/z.txt (different)
- Settings cache reset between tests (env vars read once per test)
"""

import sys
from pathlib import Path

import pytest

# Add repo root to PYTHONPATH (once for all tests)
repo_root = Path(__file__).parent.parent
if str(repo_root) not in sys.path:
    sys.path.insert(0, str(repo_root))

from dupfinder.config.settings import get_settings  # noqa: E402


@pytest.fixture(autouse=True)
def reset_settings_cache():
    """get_settings() is an lru_cache singleton: clear it around each test."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def sample_tree(tmp_path):
    """
    Structure:
        tmp_path/
            a/x.txt  "hello"
            b/y.txt  "hello"
            c/z.txt  "world"
    """
    files = {
        "x": tmp_path / "a" / "x.txt",
        "y": tmp_path / "b" / "y.txt",
        "z": tmp_path / "c" / "z.txt",
    }
    for key, content in (("x", b"hello"), ("y", b"hello"), ("z", b"world")):
        files[key].parent.mkdir(parents=True, exist_ok=True)
        files[key].write_bytes(content)
    return files
