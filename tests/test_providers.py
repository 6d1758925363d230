"""Tests for the advice, search-query and video-suggestion providers."""
import pytest
from langchain_core.runnables import RunnableLambda

from conftest import AVOCADO_ADVICE, fake_model, youtube_client
from food_assist.app.errors import AdviceProviderError, MalformedProviderResponseError
from food_assist.app.schemas import AdviceRequest
from food_assist.providers.advice import request_advice
from food_assist.providers.search_query import generate_search_query
from food_assist.providers.video import suggest_video

AVOCADO = AdviceRequest(food_item="Avocado", question="How to store it after cutting?")


def _offline(_):
    raise RuntimeError("model offline")


# ========== Advice ==========

def test_avocado_advice_has_all_three_fields(advice_llm):
    advice = request_advice(AVOCADO, llm=advice_llm)
    assert advice.storage_advice.strip()
    assert advice.reasoning.strip()
    assert advice.health_benefits.strip()
    assert "airtight container" in advice.storage_advice


def test_health_benefits_are_optional():
    llm = fake_model({"storage_advice": "- Keep dry", "reasoning": "- Mold needs moisture"})
    advice = request_advice(AdviceRequest(food_item="Bread", question="Where to keep it?"), llm=llm)
    assert advice.health_benefits is None


def test_advice_wrapped_in_markdown_fence_is_accepted():
    import json

    llm = fake_model("```json\n" + json.dumps(AVOCADO_ADVICE) + "\n```")
    assert request_advice(AVOCADO, llm=llm).reasoning.startswith("- Airtight")


@pytest.mark.parametrize(
    "reply",
    [
        "Sure! Keep it in the fridge.",
        {"storage_advice": "- Keep cold"},
        {"storage_advice": "", "reasoning": "- why"},
        {"storage_advice": "   ", "reasoning": "- x"},
        {"storage_advice": "- Keep cold", "reasoning": "\n- \n"},
    ],
)
def test_malformed_advice_raises_distinct_error(reply):
    with pytest.raises(MalformedProviderResponseError) as exc_info:
        request_advice(AVOCADO, llm=fake_model(reply))
    assert exc_info.value.kind == "malformed_provider_response"


def test_provider_failure_raises_advice_error():
    with pytest.raises(AdviceProviderError) as exc_info:
        request_advice(AVOCADO, llm=RunnableLambda(_offline))
    assert not isinstance(exc_info.value, MalformedProviderResponseError)
    assert "model offline" in str(exc_info.value)


# ========== Search query ==========

def test_search_query_is_returned_trimmed():
    llm = fake_model({"search_query": '  "how to keep avocado from browning"  '})
    assert generate_search_query(AVOCADO, llm=llm) == "how to keep avocado from browning"


@pytest.mark.parametrize("reply", ["no json here", {"search_query": "   "}, {"query": "wrong key"}])
def test_unusable_search_query_returns_none(reply):
    assert generate_search_query(AVOCADO, llm=fake_model(reply)) is None


def test_search_query_provider_failure_returns_none():
    assert generate_search_query(AVOCADO, llm=RunnableLambda(_offline)) is None


# ========== Video suggestion ==========

def test_video_found(query_llm, found_video_client):
    video = suggest_video(AVOCADO, llm=query_llm, api_key="k", client=found_video_client)
    assert video.tier == "video"
    assert video.video_url == "https://www.youtube.com/watch?v=abc123XYZ"
    assert video.search_query == "how to store cut avocado"


def test_query_without_video_keeps_query(query_llm):
    video = suggest_video(AVOCADO, llm=query_llm, api_key="k", client=youtube_client(items=[]))
    assert video.tier == "search"
    assert video.video_url is None
    assert video.search_query == "how to store cut avocado"


def test_missing_key_still_keeps_query(query_llm, no_youtube_key):
    video = suggest_video(AVOCADO, llm=query_llm)
    assert video.tier == "search"
    assert video.search_query == "how to store cut avocado"


def test_no_query_skips_lookup():
    calls = []
    video = suggest_video(AVOCADO, llm=fake_model("nothing useful"), api_key="k", client=youtube_client(calls=calls))
    assert video.tier == "none"
    assert calls == []
