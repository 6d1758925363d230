"""LangGraph state schema for one chat submission."""
import operator
from typing import Annotated, Any, Dict, List, Optional, TypedDict

from food_assist.app.schemas import AdviceRequest, FoodAdvice, VideoSuggestion


class SubmissionState(TypedDict, total=False):
    """State schema for the LangGraph submission workflow."""

    # Input
    request: AdviceRequest

    # Advice branch
    advice: Optional[FoodAdvice]
    advice_error: Optional[str]
    advice_error_kind: Optional[str]  # advice_provider_error | malformed_provider_response

    # Video branch
    video: Optional[VideoSuggestion]

    # Both branches append here in the same step
    tool_calls: Annotated[List[Dict[str, Any]], operator.add]

    # Metadata
    meta: Dict[str, Any]
