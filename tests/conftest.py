"""
Shared pytest fixtures for Food Assist tests.

Provides:
- Fake chat models standing in for OpenAI (no network)
- A YouTube API double built on httpx.MockTransport
- A TestClient wired to a fresh session store
"""
import json
from typing import Any, Callable, Dict, List, Optional

import httpx
import pytest
from fastapi.testclient import TestClient
from langchain_core.language_models.fake_chat_models import FakeListChatModel

from food_assist.app.settings import settings

AVOCADO_ADVICE = {
    "storage_advice": (
        "- Store cut avocado in an airtight container.\n"
        "- Sprinkle with lemon or lime juice before storing.\n"
        "- Alternatively, press plastic wrap directly onto the cut surface."
    ),
    "reasoning": (
        "- Airtight containers limit oxygen exposure, slowing down browning.\n"
        "- Citric acid from lemon/lime juice inhibits the enzyme that causes browning.\n"
        "- Plastic wrap creates a barrier against air."
    ),
    "health_benefits": (
        "- Rich in healthy monounsaturated fats.\n"
        "- Good source of fiber, potassium, and Vitamin K.\n"
        "- Contains antioxidants like lutein."
    ),
}


# ============================================================================
# Model Fixtures
# ============================================================================

def fake_model(*payloads: Any) -> FakeListChatModel:
    """Chat model that answers with the given payloads in order (dicts become JSON)."""
    responses = [p if isinstance(p, str) else json.dumps(p) for p in payloads]
    return FakeListChatModel(responses=responses)


@pytest.fixture
def advice_llm() -> FakeListChatModel:
    return fake_model(AVOCADO_ADVICE)


@pytest.fixture
def query_llm() -> FakeListChatModel:
    return fake_model({"search_query": "how to store cut avocado"})


# ============================================================================
# YouTube API Fixtures
# ============================================================================

def youtube_client(
    items: Optional[List[Dict[str, Any]]] = None,
    status_code: int = 200,
    body: Any = None,
    calls: Optional[List[httpx.Request]] = None,
) -> httpx.Client:
    """httpx client whose transport answers like the YouTube search endpoint."""

    def handler(request: httpx.Request) -> httpx.Response:
        if calls is not None:
            calls.append(request)
        payload = body if body is not None else {"items": items or []}
        return httpx.Response(status_code, json=payload)

    return httpx.Client(transport=httpx.MockTransport(handler))


@pytest.fixture
def found_video_client() -> httpx.Client:
    return youtube_client(items=[{"id": {"kind": "youtube#video", "videoId": "abc123XYZ"}}])


@pytest.fixture
def no_youtube_key(monkeypatch):
    monkeypatch.setattr(settings, "youtube_api_key", None)


# ============================================================================
# API Fixtures
# ============================================================================

@pytest.fixture
def store():
    from food_assist.session.store import SessionStore

    return SessionStore()


@pytest.fixture
def make_client(store) -> Callable[..., TestClient]:
    """Build a TestClient whose graph runs use the given fakes."""
    from food_assist.app.main import app, get_configurable, get_store

    def _make(**configurable: Any) -> TestClient:
        app.dependency_overrides[get_store] = lambda: store
        app.dependency_overrides[get_configurable] = lambda: configurable
        return TestClient(app)

    yield _make
    app.dependency_overrides.clear()
