# Diary entries: mood table, entry store (write-through to storage), export.
import json
import logging
import os
import threading
import time
from datetime import date, datetime

import db
import sentiment
from errors import InvalidEntry, OutOfRange, PersistenceFailure

logger = logging.getLogger(__name__)

ENTRY_ID_PREFIX = "entry_"
MAX_TEXT_LENGTH = 1000
ENTRY_FIELDS = ("id", "text", "date", "timestamp", "sentiment", "mood", "moodEmoji", "moodColor")

MOODS = [
    {"label": "Happy", "emoji": "😊", "color": "#FFD166"},
    {"label": "Sad", "emoji": "😢", "color": "#06D6A0"},
    {"label": "Angry", "emoji": "😠", "color": "#EF476F"},
    {"label": "Calm", "emoji": "😌", "color": "#118AB2"},
    {"label": "Depressed", "emoji": "😭", "color": "#073B4C"},
    {"label": "Thoughts", "emoji": "💭", "color": "#7209B7"},
]
MOOD_LABELS = [m["label"] for m in MOODS]
_MOODS_BY_LABEL = {m["label"]: m for m in MOODS}


def get_mood(label: str) -> dict | None:
    return _MOODS_BY_LABEL.get(label)


# en-US short date (M/D/YYYY); the date filter matches against this string.
def format_date(d: date) -> str:
    return f"{d.month}/{d.day}/{d.year}"


def parse_date(s: str) -> date:
    return datetime.strptime(s, "%m/%d/%Y").date()


def _eid():
    return f"{ENTRY_ID_PREFIX}{int(time.time() * 1000)}_{os.urandom(4).hex()}"


def _now_ms() -> int:
    return int(time.time() * 1000)


def build_entry(text: str, entry_date: date, mood: str, eid: str | None = None) -> dict:
    trimmed = (text or "").strip()
    if not trimmed:
        raise InvalidEntry("Please write something before saving.")
    tag = get_mood(mood)
    if tag is None:
        raise InvalidEntry(f"Unknown mood: {mood!r}")
    return {
        "id": eid or _eid(),
        "text": text,
        "date": format_date(entry_date),
        "timestamp": _now_ms(),
        "sentiment": sentiment.classify(text),
        "mood": tag["label"],
        "moodEmoji": tag["emoji"],
        "moodColor": tag["color"],
    }


def _check_stored(items) -> list:
    if not isinstance(items, list):
        raise PersistenceFailure("Stored diary entries are not a list.")
    for item in items:
        if not isinstance(item, dict) or any(k not in item for k in ENTRY_FIELDS):
            raise PersistenceFailure("Stored diary entry is missing fields.")
    return items


def format_record(e: dict) -> str:
    return f"📅 {e['date']} | {e['moodEmoji']} {e['mood']}\nSentiment: {e['sentiment']}\n{e['text']}\n---\n"


class EntryStore:
    """Ordered diary entries, newest first.

    Positions index the backing list. Every mutation writes the whole list to
    storage before the in-memory list is swapped, so a failed write changes
    nothing. Mutations are serialized with a lock.
    """

    def __init__(self, storage: db.Storage, key: str = db.ENTRIES_KEY):
        self.storage = storage
        self.key = key
        self._entries: list[dict] = []
        self._lock = threading.Lock()
        self.load()

    def load(self) -> None:
        raw = self.storage.get(self.key)
        if not raw:
            loaded = []
        else:
            try:
                loaded = _check_stored(json.loads(raw))
            except json.JSONDecodeError as e:
                raise PersistenceFailure(f"Stored diary entries are unreadable: {e}") from e
        with self._lock:
            self._entries = loaded
        logger.debug("Loaded %d diary entries", len(loaded))

    def _persist(self, entries: list[dict]) -> None:
        self.storage.set(self.key, json.dumps(entries, ensure_ascii=False))
        self._entries = entries

    def _check_position(self, position: int) -> None:
        if isinstance(position, bool) or not isinstance(position, int) or position < 0 or position >= len(self._entries):
            raise OutOfRange(f"No entry at position {position} (have {len(self._entries)}).")

    def __len__(self) -> int:
        return len(self._entries)

    def save(self, text: str, entry_date: date, mood: str) -> dict:
        entry = build_entry(text, entry_date, mood)
        with self._lock:
            self._persist([entry] + self._entries)
        logger.info("Saved entry %s (%s, %s)", entry["id"], entry["mood"], entry["sentiment"])
        return dict(entry)

    def update(self, position: int, text: str, entry_date: date, mood: str) -> dict:
        with self._lock:
            self._check_position(position)
            entry = build_entry(text, entry_date, mood, eid=self._entries[position]["id"])
            updated = list(self._entries)
            updated[position] = entry
            self._persist(updated)
        logger.info("Updated entry %s at position %d", entry["id"], position)
        return dict(entry)

    def delete(self, position: int) -> None:
        with self._lock:
            self._check_position(position)
            removed = self._entries[position]
            self._persist(self._entries[:position] + self._entries[position + 1:])
        logger.info("Deleted entry %s at position %d", removed["id"], position)

    def position_of(self, eid: str) -> int:
        for i, e in enumerate(self._entries):
            if e["id"] == eid:
                return i
        raise OutOfRange(f"No entry with id {eid!r}.")

    def all(self) -> list[dict]:
        return [dict(e) for e in self._entries]

    def export(self) -> str:
        return "\n".join(format_record(e) for e in self._entries)
