"""Session context tests: the diary is only reachable while unlocked."""

from datetime import date

import pytest

import db
from errors import Locked
from session import DiarySession

pytestmark = pytest.mark.integration


def test_locked_session_refuses_diary(storage):
    """Should raise Locked before the passcode is entered."""
    s = DiarySession(storage)
    with pytest.raises(Locked):
        s.diary()


def test_lock_closes_diary_again(session):
    """Should refuse access again after locking."""
    session.diary().save("hello", date(2024, 3, 14), "Happy")
    session.gate.lock()
    with pytest.raises(Locked):
        session.diary()


def test_scenario_sad_entry_appears_first(session):
    """Should classify and prepend a new sad entry."""
    session.diary().save("A great start", date(2024, 3, 13), "Happy")
    entry = session.diary().save("I feel so sad and alone today", date(2024, 3, 14), "Sad")

    first = session.diary().all()[0]
    assert first["id"] == entry["id"]
    assert first["sentiment"] == "Negative"


def test_new_session_starts_locked_with_saved_data(session, db_path):
    """Should reload entries in a new session that starts locked."""
    session.diary().save("persisted", date(2024, 3, 14), "Calm")

    again = DiarySession(db.Storage(db_path))
    assert not again.gate.unlocked
    assert again.gate.verify("1234")
    assert [e["text"] for e in again.diary().all()] == ["persisted"]


def test_record_login_updates_streak(session):
    """Should record today's login through the activity log."""
    a = session.record_login(date(2024, 3, 14))
    b = session.record_login(date(2024, 3, 15))
    assert (a["streak"], b["streak"]) == (1, 2)
