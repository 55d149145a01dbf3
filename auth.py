# Diary passcode gate (locked / unlocked / setting new code) and its UI.
import logging

import streamlit as st

import db
from errors import InvalidPasscode, Locked, PersistenceFailure

logger = logging.getLogger(__name__)

DEFAULT_PASSCODE = "1234"
MIN_PASSCODE_LENGTH = 4

LOCKED = "locked"
UNLOCKED = "unlocked"
SETTING_NEW_PASSCODE = "setting_new_passcode"


class PasscodeGate:
    """Access gate for the diary; not encryption.

    Starts locked. Changing the passcode is reachable from the locked state
    without entering the current one, and a fresh install accepts "1234".
    """

    def __init__(self, storage: db.Storage, key: str = db.PASSCODE_KEY):
        self.storage = storage
        self.key = key
        self.state = LOCKED

    @property
    def unlocked(self) -> bool:
        return self.state == UNLOCKED

    def stored_passcode(self) -> str:
        return self.storage.get(self.key) or DEFAULT_PASSCODE

    def verify(self, code: str) -> bool:
        if code != self.stored_passcode():
            logger.info("Passcode mismatch")
            return False
        self.state = UNLOCKED
        return True

    def begin_change(self) -> None:
        self.state = SETTING_NEW_PASSCODE

    def cancel_change(self) -> None:
        self.state = LOCKED

    def set_passcode(self, code: str) -> None:
        code = code or ""
        if len(code) < MIN_PASSCODE_LENGTH:
            raise InvalidPasscode(f"Passcode must be at least {MIN_PASSCODE_LENGTH} digits")
        if not code.isdigit():
            raise InvalidPasscode("Passcode must contain digits only")
        self.storage.set(self.key, code)
        self.state = UNLOCKED
        logger.info("Passcode updated")

    def lock(self) -> None:
        self.state = LOCKED

    def require_unlocked(self) -> None:
        if not self.unlocked:
            raise Locked("Unlock your diary first.")


def render_unlock(gate: PasscodeGate) -> None:
    st.markdown("### 🔒 Diary locked")
    st.markdown("Enter your passcode to continue")
    with st.form("unlock"):
        code = st.text_input("Passcode", type="password", max_chars=4, placeholder="••••", key="unlock_code")
        submitted = st.form_submit_button("Unlock")
        if submitted:
            if gate.verify(code):
                st.rerun()
            else:
                st.error("Incorrect passcode. Please try again.")
    if st.button("Change passcode", key="begin_change_btn"):
        gate.begin_change()
        st.rerun()


def render_change_passcode(gate: PasscodeGate) -> None:
    st.markdown("### Set a new passcode")
    st.markdown("Enter a new 4-digit passcode")
    with st.form("change_passcode"):
        code = st.text_input("New passcode", type="password", max_chars=4, placeholder="••••", key="new_code")
        submitted = st.form_submit_button("Save passcode")
        if submitted:
            try:
                gate.set_passcode(code)
                st.success("Passcode updated successfully")
                st.rerun()
            except (InvalidPasscode, PersistenceFailure) as e:
                st.error(str(e))
    if st.button("Cancel", key="cancel_change_btn"):
        gate.cancel_change()
        st.rerun()
