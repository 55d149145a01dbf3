# Settings from environment / .env and logging setup.
import logging
import os
from pathlib import Path

from dotenv import load_dotenv

BASE_DIR = Path(__file__).resolve().parent
load_dotenv(BASE_DIR / ".env")

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
DEFAULT_QUOTE_API_URL = "https://zenquotes.io/api/random"
YOUTUBE_SEARCH_URL = "https://www.googleapis.com/youtube/v3/search"


def _flag(value: str | None) -> bool:
    return (value or "").strip().lower() in ("1", "true", "yes", "on")


def get_db_path() -> Path:
    raw = os.environ.get("MOOD_JOURNAL_DB")
    return Path(raw) if raw else BASE_DIR / "journal.db"


def get_youtube_api_key() -> str | None:
    return os.environ.get("YOUTUBE_API_KEY") or None


def get_openai_api_key() -> str | None:
    return os.environ.get("OPENAI_API_KEY") or None


def get_use_ai() -> bool:
    return _flag(os.environ.get("MOOD_JOURNAL_USE_AI"))


def get_quote_api_url() -> str:
    return os.environ.get("QUOTE_API_URL") or DEFAULT_QUOTE_API_URL


def get_http_timeout() -> float:
    try:
        return float(os.environ.get("HTTP_TIMEOUT", "5"))
    except ValueError:
        return 5.0


def configure_logging() -> None:
    level = os.environ.get("MOOD_JOURNAL_LOG_LEVEL", "INFO").upper()
    logging.basicConfig(level=getattr(logging, level, logging.INFO), format=LOG_FORMAT)
