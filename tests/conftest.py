import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

import db
from session import DiarySession


# ==================== Pytest Markers ====================
def pytest_configure(config):
    """Register custom pytest markers."""
    config.addinivalue_line("markers", "unit: Unit tests (no external dependencies)")
    config.addinivalue_line("markers", "integration: Integration tests (SQLite on disk)")


# ==================== Fixtures ====================


@pytest.fixture()
def db_path(tmp_path):
    return tmp_path / "journal.db"


@pytest.fixture()
def storage(db_path):
    """Fresh SQLite key-value storage in a temp dir."""
    return db.Storage(db_path)


@pytest.fixture()
def session(storage):
    """Diary session unlocked with the factory passcode."""
    s = DiarySession(storage)
    assert s.gate.verify("1234")
    return s
