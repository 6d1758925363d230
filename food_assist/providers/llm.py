from typing import Any, Dict

from langchain_openai import ChatOpenAI

from food_assist.app.settings import settings


def build_llm(temperature: float | None = None) -> ChatOpenAI:
    # IMPORTANT: only pass api_key if it is set, otherwise let langchain-openai
    # resolve OPENAI_API_KEY from the environment.
    kwargs: Dict[str, Any] = {
        "model": settings.model_name,
        "temperature": settings.temperature if temperature is None else temperature,
        "timeout": settings.request_timeout,
        "max_retries": 0,
    }
    if settings.openai_api_key:
        kwargs["api_key"] = settings.openai_api_key
    return ChatOpenAI(**kwargs)
