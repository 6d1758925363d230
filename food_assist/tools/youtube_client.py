"""YouTube Data API v3 search client."""
import logging
from typing import Any, Dict, Optional
from urllib.parse import parse_qs, quote, urlparse

import httpx

from food_assist.app.settings import settings

logger = logging.getLogger(__name__)

WATCH_URL = "https://www.youtube.com/watch?v={video_id}"
RESULTS_URL = "https://www.youtube.com/results?search_query={query}"
_YOUTUBE_HOSTS = {"www.youtube.com", "youtube.com", "m.youtube.com", "youtu.be"}


def watch_url(video_id: str) -> str:
    return WATCH_URL.format(video_id=video_id)


def search_url(query: str) -> str:
    return RESULTS_URL.format(query=quote(query, safe=""))


def extract_video_id(url: str) -> Optional[str]:
    """Pull the video id out of a watch, short or embed URL; None for anything else."""
    try:
        parsed = urlparse(url)
    except ValueError:
        return None
    if parsed.hostname not in _YOUTUBE_HOSTS:
        return None
    ids = parse_qs(parsed.query).get("v")
    if ids and ids[0]:
        return ids[0]
    tail = parsed.path.rstrip("/").split("/")[-1]
    return tail or None


def _search_params(query: str, api_key: str) -> Dict[str, Any]:
    return {
        "part": "snippet",
        "q": query,
        "key": api_key,
        "maxResults": 1,
        "type": "video",
        "relevanceLanguage": "en",
        "safeSearch": "moderate",
    }


def _get(client: httpx.Client, params: Dict[str, Any]) -> Any:
    resp = client.get(settings.youtube_search_url, params=params)
    if resp.is_error:
        try:
            error = resp.json().get("error") or {}
            message = error.get("message") or resp.reason_phrase
        except (ValueError, AttributeError):
            message = resp.reason_phrase
        logger.error("YouTube API error (%s): %s", resp.status_code, message)
        return None
    return resp.json()


def _first_video_id(data: Any) -> Optional[str]:
    """videoId of the first search result; None for any other body shape."""
    if not isinstance(data, dict):
        return None
    items = data.get("items")
    if not isinstance(items, list) or not items or not isinstance(items[0], dict):
        return None
    ids = items[0].get("id")
    video_id = ids.get("videoId") if isinstance(ids, dict) else None
    return video_id if isinstance(video_id, str) and video_id else None


def fetch_first_youtube_video(
    query: str,
    api_key: Optional[str] = None,
    client: Optional[httpx.Client] = None,
) -> Optional[str]:
    """Return the watch URL of the top video for ``query``, or None.

    Never raises: a missing key, an API error, a transport failure or an empty
    result list all mean "no video".
    """
    api_key = api_key or settings.youtube_api_key
    if not api_key:
        logger.error("YouTube API key is not configured. Set YOUTUBE_API_KEY in your environment or .env file.")
        return None

    params = _search_params(query, api_key)
    try:
        if client is not None:
            data = _get(client, params)
        else:
            with httpx.Client(timeout=settings.request_timeout) as own_client:
                data = _get(own_client, params)
    except (httpx.HTTPError, ValueError) as exc:
        logger.error("Failed to fetch YouTube video: %s", exc)
        return None

    video_id = _first_video_id(data)
    if video_id:
        return watch_url(video_id)
    logger.info("No YouTube video found for query: %s", query)
    return None
