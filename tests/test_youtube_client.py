"""Tests for the YouTube Data API client."""
import httpx
import pytest
from unittest.mock import patch

from conftest import youtube_client
from food_assist.tools.youtube_client import extract_video_id, fetch_first_youtube_video, search_url, watch_url


def test_returns_watch_url_for_first_item(found_video_client):
    url = fetch_first_youtube_video("store cut avocado", api_key="k", client=found_video_client)
    assert url == "https://www.youtube.com/watch?v=abc123XYZ"


def test_sends_single_result_video_search():
    calls = []
    client = youtube_client(items=[], calls=calls)
    fetch_first_youtube_video("wash and store berries", api_key="secret", client=client)

    assert len(calls) == 1
    params = calls[0].url.params
    assert calls[0].method == "GET"
    assert calls[0].url.path == "/youtube/v3/search"
    assert params["q"] == "wash and store berries"
    assert params["key"] == "secret"
    assert params["maxResults"] == "1"
    assert params["type"] == "video"
    assert params["part"] == "snippet"
    assert params["safeSearch"] == "moderate"
    assert params["relevanceLanguage"] == "en"


def test_zero_items_means_no_video():
    assert fetch_first_youtube_video("q", api_key="k", client=youtube_client(items=[])) is None


def test_item_without_video_id_means_no_video():
    client = youtube_client(items=[{"id": {"kind": "youtube#channel", "channelId": "c1"}}])
    assert fetch_first_youtube_video("q", api_key="k", client=client) is None


def test_api_error_means_no_video():
    client = youtube_client(status_code=403, body={"error": {"code": 403, "message": "quotaExceeded"}})
    assert fetch_first_youtube_video("q", api_key="k", client=client) is None


@pytest.mark.parametrize(
    "body",
    [
        ["x"],
        {"items": {"id": {"videoId": "abc"}}},
        {"items": ["bad"]},
        {"items": [{"id": "abc"}]},
        {"items": [{"id": {"videoId": 42}}]},
    ],
)
def test_unexpected_body_shape_means_no_video(body):
    assert fetch_first_youtube_video("q", api_key="k", client=youtube_client(body=body)) is None


def test_error_body_without_error_object_means_no_video():
    client = youtube_client(status_code=400, body={"error": "badRequest"})
    assert fetch_first_youtube_video("q", api_key="k", client=client) is None


def test_transport_failure_means_no_video():
    def handler(request):
        raise httpx.ConnectError("unreachable", request=request)

    client = httpx.Client(transport=httpx.MockTransport(handler))
    assert fetch_first_youtube_video("q", api_key="k", client=client) is None


def test_missing_key_returns_none_without_calling_api(no_youtube_key):
    with patch("food_assist.tools.youtube_client.httpx.Client") as client_cls:
        assert fetch_first_youtube_video("q") is None
    client_cls.assert_not_called()


def test_url_helpers():
    assert watch_url("abc") == "https://www.youtube.com/watch?v=abc"
    assert search_url("keep avocado from browning") == (
        "https://www.youtube.com/results?search_query=keep%20avocado%20from%20browning"
    )
    assert search_url("eggs & milk?") == "https://www.youtube.com/results?search_query=eggs%20%26%20milk%3F"


def test_extract_video_id():
    assert extract_video_id("https://www.youtube.com/watch?v=abc123") == "abc123"
    assert extract_video_id("https://youtu.be/xyz789") == "xyz789"
    assert extract_video_id("https://www.youtube.com/embed/e1") == "e1"
    assert extract_video_id("https://example.com/watch?v=abc") is None
    assert extract_video_id("not a url") is None
