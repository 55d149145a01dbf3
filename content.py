# Mood content providers: random quote (zenquotes) and songs (YouTube search). Failures fall back.
import logging
import random

import requests

import config

logger = logging.getLogger(__name__)

FALLBACK_QUOTE = "Stay strong. Brighter days are ahead."
MAX_SONGS = 5

DIARY_QUOTES = [
    "The journal is a vehicle for my sense of self-worth.",
    "Journal writing is a voyage to the interior.",
    "Keeping a journal of what's going on in your life is a good way to help you distill what's important and what's not.",
    "Journal writing gives us insights into who we are, who we were, and who we can become.",
    "A personal journal is an ideal environment in which to become.",
    "Writing in a journal reminds you of your goals and of your learning in life.",
]


def random_diary_quote() -> str:
    return random.choice(DIARY_QUOTES)


def fetch_quote() -> str:
    try:
        resp = requests.get(config.get_quote_api_url(), timeout=config.get_http_timeout())
        resp.raise_for_status()
        data = resp.json()
        return f"{data[0]['q']} — {data[0]['a']}"
    except (requests.RequestException, ValueError, KeyError, IndexError, TypeError) as e:
        logger.warning("Quote fetch failed, using fallback: %s", e)
        return FALLBACK_QUOTE


def _song(item: dict) -> dict:
    vid = item["id"]["videoId"]
    return {
        "title": item["snippet"]["title"],
        "thumbnailUrl": item["snippet"]["thumbnails"]["default"]["url"],
        "playbackUrl": f"https://www.youtube.com/watch?v={vid}",
    }


def fetch_songs(mood: str, language: str = "English") -> list:
    key = config.get_youtube_api_key()
    if not key or not (mood or "").strip():
        return []
    params = {
        "part": "snippet",
        "q": f"{mood} songs in {language}",
        "type": "video",
        "maxResults": MAX_SONGS,
        "key": key,
    }
    try:
        resp = requests.get(config.YOUTUBE_SEARCH_URL, params=params, timeout=config.get_http_timeout())
        resp.raise_for_status()
        return [_song(item) for item in resp.json().get("items", [])]
    except (requests.RequestException, ValueError, KeyError, TypeError, AttributeError) as e:
        logger.warning("Song search failed for %r: %s", mood, e)
        return []
