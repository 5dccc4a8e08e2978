"""
Pytest configuration file.

Ensures the repo root is on sys.path so that 'import numtasks...' and
'import actions...' work, and provides fixtures for settings isolation.
"""
import sys
from pathlib import Path

import pytest

# Add the repo root to sys.path
repo_root = Path(__file__).parent.parent
if str(repo_root) not in sys.path:
    sys.path.insert(0, str(repo_root))

from numtasks.config.settings import reset_settings  # noqa: E402


@pytest.fixture
def clean_settings(monkeypatch):
    """Clear NUMTASKS_* variables and the cached settings for one test."""
    monkeypatch.delenv("NUMTASKS_RANDOM_SEED", raising=False)
    monkeypatch.delenv("NUMTASKS_LOG_LEVEL", raising=False)
    reset_settings()
    yield
    reset_settings()
