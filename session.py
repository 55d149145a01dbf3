# Per-session context: storage, accounts, passcode gate, entry store and activity log in one object.
from datetime import date

import db
from accounts import AccountStore
from auth import PasscodeGate
from entries import EntryStore
from stats import ActivityLog


class DiarySession:
    """Everything one app session needs; the diary is reachable only when unlocked.

    The entry store may be shared between sessions (it serializes its own
    writes); the gate is always per session and starts locked.
    """

    def __init__(self, storage: db.Storage | None = None, store: EntryStore | None = None):
        self.storage = storage or db.Storage()
        self.accounts = AccountStore(self.storage)
        self.gate = PasscodeGate(self.storage)
        self._store = store or EntryStore(self.storage)
        self.activity = ActivityLog(self.storage)

    def diary(self) -> EntryStore:
        self.gate.require_unlocked()
        return self._store

    def record_login(self, today: date | None = None) -> dict:
        return self.activity.record_login(today)

    def log_out(self) -> None:
        self.accounts.logout()
        self.gate.lock()
