import time
from typing import Any, Dict, Optional

from food_assist.app.schemas import Meta, TokenUsage


def build_meta(graph_meta: Optional[Dict[str, Any]] = None, start_ms: Optional[int] = None) -> Meta:
    """Response meta; prefers the latency measured by the trace node."""
    latency_ms = (graph_meta or {}).get("latency_ms")
    if latency_ms is None:
        latency_ms = int(time.time() * 1000 - start_ms) if start_ms else 0
    return Meta(latency_ms=latency_ms, token_usage=TokenUsage(), cost_usd_estimate=0.0)
