# Local accounts: sign-up, login, logout, PBKDF2 password hashes, and their forms.
import base64
import json
import logging
import os
import re
from datetime import date

import streamlit as st
from cryptography.exceptions import InvalidKey
from cryptography.hazmat.backends import default_backend
from cryptography.hazmat.primitives import hashes
from cryptography.hazmat.primitives.kdf.pbkdf2 import PBKDF2HMAC

import db
from errors import AccountExists, InvalidAccount, InvalidCredentials, PersistenceFailure

logger = logging.getLogger(__name__)

PBKDF2_ITERATIONS = 250_000
SALT_LENGTH = 16
KEY_LENGTH = 32
MIN_PASSWORD_LENGTH = 6
EMAIL_RE = re.compile(r"^[A-Z0-9._%+-]+@[A-Z0-9.-]+\.[A-Z]{2,}$", re.I)
GENDERS = ("male", "female", "other", "prefer-not-to-say")


def _kdf(salt: bytes, iterations: int) -> PBKDF2HMAC:
    return PBKDF2HMAC(
        algorithm=hashes.SHA256(),
        length=KEY_LENGTH,
        salt=salt,
        iterations=iterations,
        backend=default_backend(),
    )


def hash_password(password: str) -> dict:
    salt = os.urandom(SALT_LENGTH)
    key = _kdf(salt, PBKDF2_ITERATIONS).derive(password.encode("utf-8"))
    return {
        "salt": base64.b64encode(salt).decode("ascii"),
        "hash": base64.b64encode(key).decode("ascii"),
        "iterations": PBKDF2_ITERATIONS,
    }


def check_password(password: str, stored: dict) -> bool:
    salt = base64.b64decode(stored["salt"])
    try:
        _kdf(salt, stored["iterations"]).verify(password.encode("utf-8"), base64.b64decode(stored["hash"]))
    except InvalidKey:
        return False
    return True


def calculate_age(birth_date: date, today: date) -> int:
    age = today.year - birth_date.year
    if (today.month, today.day) < (birth_date.month, birth_date.day):
        age -= 1
    return age


def _normalize_email(email: str) -> str:
    return (email or "").strip().lower()


def _public(user: dict) -> dict:
    return {k: v for k, v in user.items() if k != "password"}


class AccountStore:
    """Accounts kept on this device, with at most one logged in.

    Passwords are stored as salted PBKDF2 hashes. The diary itself is shared
    by every account on the device and stays behind the passcode gate.
    """

    def __init__(self, storage: db.Storage, users_key: str = db.USERS_KEY, current_key: str = db.CURRENT_USER_KEY):
        self.storage = storage
        self.users_key = users_key
        self.current_key = current_key

    def _users(self) -> list[dict]:
        raw = self.storage.get(self.users_key)
        if not raw:
            return []
        try:
            users = json.loads(raw)
        except json.JSONDecodeError as e:
            raise PersistenceFailure(f"Stored accounts are unreadable: {e}") from e
        if not isinstance(users, list):
            raise PersistenceFailure("Stored accounts are not a list.")
        return users

    def _find(self, email: str) -> dict | None:
        for u in self._users():
            if u.get("email") == email:
                return u
        return None

    def sign_up(self, email: str, password: str, confirm: str, name: str, gender: str,
                birth_date: date, today: date | None = None) -> dict:
        today = today or date.today()
        email = _normalize_email(email)
        name = (name or "").strip()
        if not email or not password or not confirm or not name or not gender or birth_date is None:
            raise InvalidAccount("Please fill in all fields.")
        if not EMAIL_RE.match(email):
            raise InvalidAccount("Please enter a valid email address.")
        if len(password) < MIN_PASSWORD_LENGTH:
            raise InvalidAccount(f"Password must be at least {MIN_PASSWORD_LENGTH} characters.")
        if password != confirm:
            raise InvalidAccount("Passwords do not match.")
        if gender not in GENDERS:
            raise InvalidAccount(f"Unknown gender option: {gender!r}")
        if birth_date > today:
            raise InvalidAccount("Date of birth cannot be in the future.")

        users = self._users()
        if any(u.get("email") == email for u in users):
            raise AccountExists("An account with this email already exists.")
        user = {
            "email": email,
            "name": name,
            "gender": gender,
            "birthDate": birth_date.isoformat(),
            "age": calculate_age(birth_date, today),
            "password": hash_password(password),
        }
        self.storage.set(self.users_key, json.dumps(users + [user]))
        self.storage.set(self.current_key, email)
        logger.info("Account created for %s", email)
        return _public(user)

    def login(self, email: str, password: str) -> dict:
        email = _normalize_email(email)
        if not email or not password:
            raise InvalidCredentials("Please enter your email and password.")
        user = self._find(email)
        if user is None or not check_password(password, user["password"]):
            logger.info("Failed login for %s", email)
            raise InvalidCredentials("Invalid email or password.")
        self.storage.set(self.current_key, email)
        logger.info("Logged in %s", email)
        return _public(user)

    def logout(self) -> None:
        self.storage.delete(self.current_key)

    def current_user(self) -> dict | None:
        email = self.storage.get(self.current_key)
        if not email:
            return None
        user = self._find(email)
        return _public(user) if user else None


def render_login(store: AccountStore) -> None:
    st.markdown("### Welcome back")
    with st.form("login"):
        email = st.text_input("Email", key="login_email")
        password = st.text_input("Password", type="password", key="login_password")
        if st.form_submit_button("Log in"):
            try:
                store.login(email, password)
                st.rerun()
            except (InvalidCredentials, PersistenceFailure) as e:
                st.error(str(e))


def render_sign_up(store: AccountStore) -> None:
    st.markdown("### Create your account")
    with st.form("sign_up"):
        name = st.text_input("Full name", key="signup_name")
        email = st.text_input("Email", key="signup_email")
        gender = st.selectbox("Gender", GENDERS, key="signup_gender")
        birth = st.date_input("Date of birth", value=None, min_value=date(1900, 1, 1),
                              max_value=date.today(), key="signup_birth")
        password = st.text_input("Password", type="password", key="signup_password")
        confirm = st.text_input("Confirm password", type="password", key="signup_confirm")
        if st.form_submit_button("Sign up"):
            try:
                store.sign_up(email, password, confirm, name, gender, birth)
                st.rerun()
            except (InvalidAccount, AccountExists, PersistenceFailure) as e:
                st.error(str(e))
