"""Stats tests: distributions, first entry date, login streak, points, activity log."""

from datetime import date, datetime, timedelta
from unittest.mock import patch

import pytest

import stats
from entries import EntryStore
from errors import PersistenceFailure

pytestmark = pytest.mark.unit

TODAY = date(2024, 3, 14)


def _entry(mood="Happy", sentiment="Neutral", ts=0):
    return {"mood": mood, "sentiment": sentiment, "timestamp": ts}


# ==================== Distribution Tests ====================


def test_sentiment_distribution_zero_filled():
    """Should always report all three sentiments."""
    assert stats.sentiment_distribution([]) == {"Positive": 0, "Negative": 0, "Neutral": 0}
    counts = stats.sentiment_distribution([_entry(sentiment="Positive"), _entry(sentiment="Positive")])
    assert counts == {"Positive": 2, "Negative": 0, "Neutral": 0}


def test_mood_distribution_happy_happy_sad():
    """Should tally moods over the whole mood table."""
    counts = stats.mood_distribution([_entry("Happy"), _entry("Happy"), _entry("Sad")])
    assert counts == {"Happy": 2, "Sad": 1, "Angry": 0, "Calm": 0, "Depressed": 0, "Thoughts": 0}


def test_mood_distribution_ignores_unknown_moods():
    """Should skip moods outside the table."""
    counts = stats.mood_distribution([_entry("Bored")])
    assert sum(counts.values()) == 0


def test_first_entry_date():
    """Should use the smallest timestamp, or N/A when empty."""
    assert stats.first_entry_date([]) == "N/A"
    early = int(datetime(2023, 7, 4, 12).timestamp() * 1000)
    late = int(datetime(2024, 1, 1, 12).timestamp() * 1000)
    assert stats.first_entry_date([_entry(ts=late), _entry(ts=early)]) == "7/4/2023"


# ==================== Streak Tests ====================


def test_first_login_starts_streak():
    """Should start the streak at 1 with one point."""
    a = stats.update_login_streak(stats.empty_activity(), TODAY)
    assert a["streak"] == 1
    assert a["points"] == 1
    assert a["lastLoginDate"] == "2024-03-14"
    assert a["loginDates"] == ["2024-03-14"]


def test_same_day_twice_changes_nothing():
    """Should not inflate streak or points within one day."""
    once = stats.update_login_streak(stats.empty_activity(), TODAY)
    twice = stats.update_login_streak(once, TODAY)
    assert twice == once


def test_consecutive_days_increment():
    """Should add one to the streak per consecutive day."""
    a = stats.empty_activity()
    for i in range(4):
        a = stats.update_login_streak(a, TODAY + timedelta(days=i))
    assert a["streak"] == 4
    assert a["points"] == 4


def test_gap_resets_streak_but_keeps_points():
    """Should reset the streak to 1 after a gap while points keep growing."""
    a = stats.update_login_streak(stats.empty_activity(), TODAY)
    a = stats.update_login_streak(a, TODAY + timedelta(days=1))
    a = stats.update_login_streak(a, TODAY + timedelta(days=4))
    assert a["streak"] == 1
    assert a["points"] == 3
    assert len(a["loginDates"]) == 3


def test_update_does_not_mutate_input():
    """Should return a new dict."""
    before = stats.empty_activity()
    stats.update_login_streak(before, TODAY)
    assert before == stats.empty_activity()


def test_earlier_day_login_keeps_streak_and_last_date():
    """Should leave streak and last login alone when the clock moves back."""
    a = stats.update_login_streak(stats.empty_activity(), date(2024, 3, 14))
    a = stats.update_login_streak(a, date(2024, 3, 15))
    a = stats.update_login_streak(a, date(2024, 3, 13))

    assert a["streak"] == 2
    assert a["lastLoginDate"] == "2024-03-15"
    assert a["points"] == 3


def test_returning_to_latest_day_does_not_double_count():
    """Should award one point per distinct day across a backwards clock."""
    a = stats.update_login_streak(stats.empty_activity(), date(2024, 3, 15))
    a = stats.update_login_streak(a, date(2024, 3, 14))
    a = stats.update_login_streak(a, date(2024, 3, 15))

    assert a["points"] == 2
    assert a["streak"] == 1
    assert a["lastLoginDate"] == "2024-03-15"
    assert sorted(a["loginDates"]) == ["2024-03-14", "2024-03-15"]


def test_legacy_blob_without_login_dates():
    """Should count the stored last login as already awarded."""
    legacy = {"streak": 3, "points": 3, "lastLoginDate": "2024-03-14"}
    a = stats.update_login_streak(legacy, TODAY)
    assert a["points"] == 3
    assert a["loginDates"] == ["2024-03-14"]


def test_bonus_and_levels():
    """Should derive display bonus, level and reward progress."""
    assert stats.bonus_points(5) == 10
    assert stats.achievement_level(0) == "Beginner"
    assert stats.achievement_level(7) == "Advanced"
    assert stats.achievement_level(14) == "Master"
    assert stats.achievement_level(45) == "Legendary"
    assert stats.reward_progress(250) == {"unlocked": 2, "toNext": 50}
    assert stats.reward_progress(0) == {"unlocked": 0, "toNext": 100}


def test_weekly_mood_stats_window():
    """Should count only check-ins from the last seven days."""
    history = [
        {"mood": "Happy", "date": "2024-03-14", "time": "09:00"},
        {"mood": "Happy", "date": "2024-03-08", "time": "09:00"},
        {"mood": "Sad", "date": "2024-03-07", "time": "09:00"},
        {"mood": "Sad", "date": "not a date", "time": "09:00"},
    ]
    assert stats.weekly_mood_stats(history, TODAY) == {"Happy": 2}


def test_mood_history_counts_all_time():
    """Should tally every check-in in mood-table order, skipping zeros."""
    history = [
        {"mood": "Calm", "date": "2024-03-14", "time": "18:05"},
        {"mood": "Happy", "date": "2024-03-14", "time": "08:30"},
        {"mood": "Calm", "date": "2023-01-02", "time": "07:00"},
        {"mood": "Mystery", "date": "2023-01-01", "time": "07:00"},
    ]
    counts = stats.mood_history_counts(history)
    assert counts == {"Happy": 1, "Calm": 2, "Mystery": 1}
    assert list(counts) == ["Happy", "Calm", "Mystery"]
    assert stats.mood_history_counts([]) == {}


# ==================== Activity Log Tests ====================


@pytest.mark.integration
def test_activity_log_records_login_once_per_day(storage):
    """Should persist the login and ignore repeats the same day."""
    log = stats.ActivityLog(storage)
    log.record_login(TODAY)
    log.record_login(TODAY)
    a = log.record_login(TODAY + timedelta(days=1))

    assert log.load() == a
    assert a["streak"] == 2
    assert a["points"] == 2


@pytest.mark.integration
def test_activity_log_same_day_skips_write(storage):
    """Should not write when nothing changed."""
    log = stats.ActivityLog(storage)
    log.record_login(TODAY)
    with patch.object(storage, "set") as mock_set:
        log.record_login(TODAY)
    mock_set.assert_not_called()


@pytest.mark.integration
def test_activity_log_records_moods(storage):
    """Should prepend mood check-ins to the history."""
    log = stats.ActivityLog(storage)
    log.record_mood("Calm", datetime(2024, 3, 14, 8, 30))
    a = log.record_mood("Angry", datetime(2024, 3, 14, 18, 5))

    assert [m["mood"] for m in a["moodHistory"]] == ["Angry", "Calm"]
    assert a["moodHistory"][0] == {"mood": "Angry", "date": "2024-03-14", "time": "18:05"}
    assert log.load()["moodHistory"] == a["moodHistory"]


@pytest.mark.integration
def test_activity_log_unreadable(storage):
    """Should surface corrupt stats as PersistenceFailure."""
    storage.set(stats.db.STATS_KEY, "[]")
    with pytest.raises(PersistenceFailure):
        stats.ActivityLog(storage).load()


@pytest.mark.integration
def test_distribution_over_saved_entries(storage):
    """Should tally real saved entries."""
    store = EntryStore(storage)
    store.save("happy", TODAY, "Happy")
    store.save("great", TODAY, "Happy")
    store.save("sad", TODAY, "Sad")

    assert stats.mood_distribution(store.all())["Happy"] == 2
    assert stats.sentiment_distribution(store.all()) == {"Positive": 2, "Negative": 1, "Neutral": 0}
