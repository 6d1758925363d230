import logging
from typing import Any, Dict

from langchain_core.runnables import RunnableConfig

from food_assist.app.schemas import VideoSuggestion
from food_assist.orchestration.state import SubmissionState
from food_assist.providers.video import suggest_video

logger = logging.getLogger(__name__)


def video_node(state: SubmissionState, config: RunnableConfig) -> Dict[str, Any]:
    configurable = config.get("configurable") or {}
    try:
        video = suggest_video(
            state["request"],
            llm=configurable.get("search_query_llm"),
            api_key=configurable.get("youtube_api_key"),
            client=configurable.get("youtube_client"),
        )
    except Exception as exc:  # noqa: BLE001
        # Any lookup failure degrades to "no suggestion"
        logger.error("Video suggestion failed: %s", exc, exc_info=True)
        return {
            "video": VideoSuggestion(),
            "tool_calls": [{"tool_name": "youtube_search", "status": "error", "error": str(exc)}],
        }
    return {
        "video": video,
        "tool_calls": [{"tool_name": "youtube_search", "status": "ok", "tier": video.tier}],
    }
