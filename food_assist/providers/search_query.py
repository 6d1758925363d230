"""Search-query provider: food item + question -> one YouTube search string."""
import logging
from typing import Optional

from langchain_core.language_models import BaseChatModel
from langchain_core.output_parsers import PydanticOutputParser
from langchain_core.prompts import ChatPromptTemplate

from food_assist.app.schemas import AdviceRequest, SearchQuery
from food_assist.prompts.search_query_prompt import SEARCH_QUERY_SYSTEM, SEARCH_QUERY_USER_TEMPLATE
from food_assist.providers.llm import build_llm

logger = logging.getLogger(__name__)


def _build_chain(llm: Optional[BaseChatModel] = None):
    parser = PydanticOutputParser(pydantic_object=SearchQuery)
    prompt = ChatPromptTemplate.from_messages(
        [
            ("system", SEARCH_QUERY_SYSTEM),
            ("user", SEARCH_QUERY_USER_TEMPLATE + "\nReturn JSON only.\n{format_instructions}"),
        ]
    ).partial(format_instructions=parser.get_format_instructions())
    return prompt | (llm or build_llm(temperature=0)) | parser


def generate_search_query(request: AdviceRequest, llm: Optional[BaseChatModel] = None) -> Optional[str]:
    """Return a search query, or None when the model could not produce one."""
    try:
        chain = _build_chain(llm)
        result: SearchQuery = chain.invoke({"food_item": request.food_item, "question": request.question})
    except Exception as exc:  # noqa: BLE001
        logger.warning("Search query generation failed: %s", exc)
        return None

    query = result.search_query.strip().strip("\"'").strip()
    if not query:
        logger.info("LLM returned an empty search query")
        return None
    return query
