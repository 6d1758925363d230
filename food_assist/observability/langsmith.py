import logging
import os
from typing import Any, Dict

from food_assist.app.schemas import AdviceRequest
from food_assist.app.settings import settings

logger = logging.getLogger(__name__)

DEFAULT_PROJECT = "food-assist"
RUN_NAME = "food_assist_submission"


def configure_tracing() -> bool:
    """Export LangSmith settings so LangChain traces every advice and video run.

    Tracing is on only when ``LANGCHAIN_TRACING_V2`` is set and an API key is
    available; submissions land in the ``food-assist`` project unless
    ``LANGSMITH_PROJECT`` names another one. Returns whether tracing is on.
    """
    if not settings.langchain_tracing_v2:
        return False
    if not settings.langsmith_api_key and not os.environ.get("LANGSMITH_API_KEY"):
        logger.warning("LANGCHAIN_TRACING_V2 is set but LANGSMITH_API_KEY is missing; tracing stays off")
        return False

    os.environ["LANGCHAIN_TRACING_V2"] = "true"
    if settings.langsmith_api_key:
        os.environ["LANGSMITH_API_KEY"] = settings.langsmith_api_key
    os.environ["LANGSMITH_PROJECT"] = settings.langsmith_project or DEFAULT_PROJECT
    logger.info("LangSmith tracing enabled for project %s", os.environ["LANGSMITH_PROJECT"])
    return True


def tracing_config(session_id: str, request: AdviceRequest) -> Dict[str, Any]:
    """Run name, tags and metadata attached to one submission's graph run."""
    return {
        "run_name": RUN_NAME,
        "tags": ["food-assist", "chat"],
        "metadata": {
            "session_id": session_id,
            "food_item": request.food_item,
            "question_length": len(request.question),
        },
    }
