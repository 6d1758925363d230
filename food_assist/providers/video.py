import logging
from typing import Optional

import httpx
from langchain_core.language_models import BaseChatModel

from food_assist.app.schemas import AdviceRequest, VideoSuggestion
from food_assist.providers.search_query import generate_search_query
from food_assist.tools.youtube_client import fetch_first_youtube_video

logger = logging.getLogger(__name__)


def suggest_video(
    request: AdviceRequest,
    llm: Optional[BaseChatModel] = None,
    api_key: Optional[str] = None,
    client: Optional[httpx.Client] = None,
) -> VideoSuggestion:
    # Step 1: ask the model for a search query
    search_query = generate_search_query(request, llm=llm)
    if not search_query:
        logger.info("LLM failed to generate a search query.")
        return VideoSuggestion()

    # Step 2: resolve the query to a single video
    video_url = fetch_first_youtube_video(search_query, api_key=api_key, client=client)
    if not video_url:
        logger.info('No video found via YouTube API for query: "%s"', search_query)
    return VideoSuggestion(search_query=search_query, video_url=video_url)
