import logging
from typing import Any, Dict

from langchain_core.runnables import RunnableConfig

from food_assist.app.errors import AdviceProviderError
from food_assist.orchestration.state import SubmissionState
from food_assist.providers.advice import request_advice

logger = logging.getLogger(__name__)


def advice_node(state: SubmissionState, config: RunnableConfig) -> Dict[str, Any]:
    llm = (config.get("configurable") or {}).get("advice_llm")
    try:
        advice = request_advice(state["request"], llm=llm)
    except AdviceProviderError as exc:
        logger.warning("Advice branch failed (%s): %s", exc.kind, exc)
        return {
            "advice": None,
            "advice_error": str(exc),
            "advice_error_kind": exc.kind,
            "tool_calls": [{"tool_name": "advice_provider", "status": "error", "error": str(exc)}],
        }
    return {
        "advice": advice,
        "advice_error": None,
        "advice_error_kind": None,
        "tool_calls": [{"tool_name": "advice_provider", "status": "ok"}],
    }
