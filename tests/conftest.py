"""
Pytest configuration file.

Ensures the repo root is on sys.path so that 'import csvtable...' and
'import actions...' work, and isolates tests from any .env settings.
"""
import sys
from pathlib import Path

import pytest

# Add the repo root to sys.path
repo_root = Path(__file__).parent.parent
if str(repo_root) not in sys.path:
    sys.path.insert(0, str(repo_root))

from csvtable.config.settings import reset_settings


@pytest.fixture(autouse=True)
def clean_settings(monkeypatch):
    """Clear CSVTABLE_* variables and the settings cache around every test."""
    for name in ("CSVTABLE_ENCODING", "CSVTABLE_LINE_ENDING", "CSVTABLE_DATA_DIR"):
        monkeypatch.delenv(name, raising=False)
    reset_settings()
    yield
    reset_settings()
