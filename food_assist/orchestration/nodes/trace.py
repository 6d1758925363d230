import logging
import time
from typing import Any, Dict

from food_assist.orchestration.state import SubmissionState

logger = logging.getLogger(__name__)


def trace_node(state: SubmissionState) -> Dict[str, Any]:
    meta = dict(state.get("meta") or {})
    start = meta.get("start_time_ms")
    latency = int(time.time() * 1000 - start) if start else 0
    meta["latency_ms"] = latency
    video = state.get("video")
    logger.info(
        "food_item=%s advice=%s video_tier=%s latency_ms=%s tool_calls=%s",
        meta.get("food_item"),
        "error" if state.get("advice_error") else "ok",
        video.tier if video else "none",
        latency,
        len(state.get("tool_calls", [])),
    )
    return {"meta": meta}
