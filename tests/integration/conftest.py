"""
Integration test fixtures.

Integration tests:
- Test component boundaries
- Use real I/O but to temp locations
- Should be deterministic
"""

import json
import pytest
import tempfile
import shutil
from pathlib import Path


@pytest.fixture
def temp_dir():
    """Temporary directory for test data."""
    d = tempfile.mkdtemp()
    yield Path(d)
    shutil.rmtree(d, ignore_errors=True)


@pytest.fixture
def faq_file(temp_dir, corpus_data):
    """FAQ document written to disk."""
    path = temp_dir / "all-faqs.json"
    path.write_text(json.dumps(corpus_data), encoding="utf-8")
    return path


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep the developer's environment out of config tests."""
    for name in (
        "FAQ_DATA_PATH", "FAQ_SEARCH_THRESHOLD", "FAQ_IGNORE_LOCATION",
        "FAQ_INTRO_MARKER", "FAQ_FEATURED_SIZE", "FAQ_PREVIEW_SIZE",
        "LOG_LEVEL", "FAQ_EXPLORER_PORT",
    ):
        monkeypatch.delenv(name, raising=False)
