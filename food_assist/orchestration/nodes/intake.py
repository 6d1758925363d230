import time
from typing import Any, Dict

from food_assist.orchestration.state import SubmissionState


def intake_node(state: SubmissionState) -> Dict[str, Any]:
    meta = dict(state.get("meta") or {})
    meta.setdefault("start_time_ms", int(time.time() * 1000))
    meta["food_item"] = state["request"].food_item
    return {"meta": meta}
