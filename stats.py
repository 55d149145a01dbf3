# Stats: sentiment/mood tallies, first entry, login streak and points, weekly check-ins.
import json
import logging
import threading
from datetime import date, datetime, timedelta

import db
import entries as entries_mod
import sentiment
from errors import PersistenceFailure

logger = logging.getLogger(__name__)

NA = "N/A"
BONUS_PER_STREAK_DAY = 2
POINTS_PER_REWARD = 100
WEEK_DAYS = 7
LEVELS = [(30, "Legendary"), (14, "Master"), (7, "Advanced"), (0, "Beginner")]

# Guards load-modify-save of the stats blob across sessions in one process.
_write_lock = threading.Lock()


def empty_activity() -> dict:
    return {"streak": 0, "points": 0, "lastLoginDate": None, "loginDates": [], "moodHistory": []}


def sentiment_distribution(entries: list) -> dict:
    counts = {label: 0 for label in sentiment.LABELS}
    for e in entries:
        if e.get("sentiment") in counts:
            counts[e["sentiment"]] += 1
    return counts


def mood_distribution(entries: list) -> dict:
    counts = {label: 0 for label in entries_mod.MOOD_LABELS}
    for e in entries:
        if e.get("mood") in counts:
            counts[e["mood"]] += 1
    return counts


def first_entry_date(entries: list) -> str:
    if not entries:
        return NA
    first = min(entries, key=lambda e: e["timestamp"])
    return entries_mod.format_date(datetime.fromtimestamp(first["timestamp"] / 1000.0).date())


def update_login_streak(activity: dict, today: date) -> dict:
    """Return a new activity dict with today's login applied.

    Same day again: nothing changes. Previous login yesterday: streak + 1.
    No previous login, or a gap: streak restarts at 1. A login dated before
    the latest one (clock moved back) leaves streak and lastLoginDate alone.
    Points go up by one per distinct login day.
    """
    out = {**empty_activity(), **activity}
    out["loginDates"] = list(out["loginDates"])
    if out["lastLoginDate"] and out["lastLoginDate"] not in out["loginDates"]:
        out["loginDates"].append(out["lastLoginDate"])
    last = date.fromisoformat(out["lastLoginDate"]) if out["lastLoginDate"] else None
    day = today.isoformat()
    if last is None or today > last:
        if last is not None and last == today - timedelta(days=1):
            out["streak"] += 1
        else:
            out["streak"] = 1
        out["lastLoginDate"] = day
    if day not in out["loginDates"]:
        out["points"] += 1
        out["loginDates"].append(day)
    return out


def bonus_points(streak: int) -> int:
    return streak * BONUS_PER_STREAK_DAY


def achievement_level(streak: int) -> str:
    for threshold, name in LEVELS:
        if streak >= threshold:
            return name
    return LEVELS[-1][1]


def reward_progress(points: int) -> dict:
    return {
        "unlocked": points // POINTS_PER_REWARD,
        "toNext": POINTS_PER_REWARD - (points % POINTS_PER_REWARD),
    }


def weekly_mood_stats(mood_history: list, today: date) -> dict:
    start = today - timedelta(days=WEEK_DAYS - 1)
    counts = {}
    for item in mood_history:
        try:
            d = date.fromisoformat(item["date"])
        except (KeyError, TypeError, ValueError):
            continue
        if start <= d <= today:
            counts[item["mood"]] = counts.get(item["mood"], 0) + 1
    return counts


def mood_history_counts(mood_history: list) -> dict:
    """All-time check-in tally; table moods first, zero counts omitted."""
    counts = {}
    for item in mood_history:
        mood = item.get("mood")
        if mood:
            counts[mood] = counts.get(mood, 0) + 1
    order = {label: i for i, label in enumerate(entries_mod.MOOD_LABELS)}
    return dict(sorted(counts.items(), key=lambda kv: order.get(kv[0], len(order))))


class ActivityLog:
    """Persisted login streak, points and quick mood check-ins."""

    def __init__(self, storage: db.Storage, key: str = db.STATS_KEY):
        self.storage = storage
        self.key = key

    def load(self) -> dict:
        raw = self.storage.get(self.key)
        if not raw:
            return empty_activity()
        try:
            data = json.loads(raw)
        except json.JSONDecodeError as e:
            raise PersistenceFailure(f"Stored stats are unreadable: {e}") from e
        if not isinstance(data, dict):
            raise PersistenceFailure("Stored stats are not an object.")
        return {**empty_activity(), **data}

    def save(self, activity: dict) -> None:
        self.storage.set(self.key, json.dumps(activity))

    def record_login(self, today: date | None = None) -> dict:
        today = today or date.today()
        with _write_lock:
            before = self.load()
            after = update_login_streak(before, today)
            if after != before:
                self.save(after)
        if after != before:
            logger.info("Login recorded for %s (streak %d, points %d)", today, after["streak"], after["points"])
        return after

    def record_mood(self, mood: str, now: datetime | None = None) -> dict:
        now = now or datetime.now()
        item = {"mood": mood, "date": now.date().isoformat(), "time": now.strftime("%H:%M")}
        with _write_lock:
            activity = self.load()
            activity["moodHistory"] = [item] + list(activity["moodHistory"])
            self.save(activity)
        return activity
