"""Quote and song provider tests (HTTP mocked)."""

from unittest.mock import MagicMock, patch

import pytest
import requests

import content

pytestmark = pytest.mark.unit


def _response(payload):
    resp = MagicMock()
    resp.json.return_value = payload
    resp.raise_for_status.return_value = None
    return resp


def test_fetch_quote_formats_quote_and_author():
    """Should join quote and author."""
    with patch("content.requests.get", return_value=_response([{"q": "Keep going.", "a": "Someone"}])):
        assert content.fetch_quote() == "Keep going. — Someone"


@pytest.mark.parametrize("side_effect", [requests.ConnectionError("down"), requests.Timeout("slow")])
def test_fetch_quote_network_failure_falls_back(side_effect):
    """Should return the static quote when the request fails."""
    with patch("content.requests.get", side_effect=side_effect):
        assert content.fetch_quote() == content.FALLBACK_QUOTE


def test_fetch_quote_bad_payload_falls_back():
    """Should return the static quote on an unexpected payload."""
    with patch("content.requests.get", return_value=_response([])):
        assert content.fetch_quote() == content.FALLBACK_QUOTE


def test_fetch_songs_without_key_is_empty(monkeypatch):
    """Should return no songs and make no request without an API key."""
    monkeypatch.delenv("YOUTUBE_API_KEY", raising=False)
    with patch("content.requests.get") as mock_get:
        assert content.fetch_songs("happy", "English") == []
    mock_get.assert_not_called()


def test_fetch_songs_maps_results(monkeypatch):
    """Should map search items to title, thumbnail and playback url."""
    monkeypatch.setenv("YOUTUBE_API_KEY", "test-key")
    payload = {
        "items": [
            {
                "id": {"videoId": "abc123"},
                "snippet": {"title": "Happy Song", "thumbnails": {"default": {"url": "http://img/1.jpg"}}},
            }
        ]
    }
    with patch("content.requests.get", return_value=_response(payload)) as mock_get:
        songs = content.fetch_songs("happy", "Hindi")

    assert songs == [
        {"title": "Happy Song", "thumbnailUrl": "http://img/1.jpg", "playbackUrl": "https://www.youtube.com/watch?v=abc123"}
    ]
    params = mock_get.call_args.kwargs["params"]
    assert params["q"] == "happy songs in Hindi"
    assert params["maxResults"] == 5


def test_fetch_songs_failure_is_empty(monkeypatch):
    """Should treat provider errors as an empty list."""
    monkeypatch.setenv("YOUTUBE_API_KEY", "test-key")
    with patch("content.requests.get", side_effect=requests.HTTPError("403")):
        assert content.fetch_songs("sad") == []


def test_random_diary_quote():
    """Should pick one of the static diary quotes."""
    assert content.random_diary_quote() in content.DIARY_QUOTES
