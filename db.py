# SQLite key-value storage. Every call opens its own connection; use _with_conn for DB access.
import logging
import sqlite3
from pathlib import Path

import config
from errors import PersistenceFailure

logger = logging.getLogger(__name__)

ENTRIES_KEY = "diaryEntries"
PASSCODE_KEY = "diaryPasscode"
STATS_KEY = "moodStats"
USERS_KEY = "users"
CURRENT_USER_KEY = "currentUser"
MAX_ATTEMPTS = 2


class Storage:
    """Durable key-value store with get/set semantics over one SQLite table.

    Writes are single statements inside a transaction, so a value is either
    fully replaced or left as it was. A failing call is retried once, then
    surfaces as PersistenceFailure.
    """

    def __init__(self, path: str | Path | None = None):
        self.path = Path(path) if path else config.get_db_path()
        self._with_conn(self._init_schema)

    def get_conn(self):
        conn = sqlite3.connect(self.path)
        conn.row_factory = sqlite3.Row
        return conn

    def _with_conn(self, f):
        last_error = None
        for attempt in range(1, MAX_ATTEMPTS + 1):
            try:
                conn = self.get_conn()
            except sqlite3.Error as e:
                last_error = e
            else:
                # Closing without commit discards a half-done write.
                try:
                    return f(conn)
                except sqlite3.Error as e:
                    last_error = e
                finally:
                    conn.close()
            if attempt < MAX_ATTEMPTS:
                logger.warning("Storage call failed (%s), retrying once", last_error)
        raise PersistenceFailure(f"Could not access storage at {self.path}: {last_error}") from last_error

    @staticmethod
    def _init_schema(c):
        c.execute("CREATE TABLE IF NOT EXISTS kv (key TEXT PRIMARY KEY, value TEXT NOT NULL)")
        c.commit()

    def get(self, key: str) -> str | None:
        def run(c):
            row = c.execute("SELECT value FROM kv WHERE key = ?", (key,)).fetchone()
            return None if row is None else row["value"]
        return self._with_conn(run)

    def set(self, key: str, value: str) -> None:
        def run(c):
            c.execute("INSERT OR REPLACE INTO kv (key, value) VALUES (?, ?)", (key, value))
            c.commit()
        self._with_conn(run)

    def delete(self, key: str) -> None:
        def run(c):
            c.execute("DELETE FROM kv WHERE key = ?", (key,))
            c.commit()
        self._with_conn(run)
