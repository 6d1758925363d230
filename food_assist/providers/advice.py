"""Advice provider: food item + question -> storage advice, reasoning, health benefits."""
import logging
from typing import Any, Dict, Optional

from langchain_core.exceptions import OutputParserException
from langchain_core.language_models import BaseChatModel
from langchain_core.output_parsers import PydanticOutputParser
from langchain_core.prompts import ChatPromptTemplate
from openai import RateLimitError
from pydantic import ValidationError

from food_assist.app.errors import AdviceProviderError, MalformedProviderResponseError
from food_assist.app.schemas import AdviceRequest, FoodAdvice
from food_assist.prompts.advice_prompt import ADVICE_SYSTEM, ADVICE_USER_TEMPLATE
from food_assist.providers.llm import build_llm

logger = logging.getLogger(__name__)


def _build_chain(llm: Optional[BaseChatModel] = None):
    parser = PydanticOutputParser(pydantic_object=FoodAdvice)
    prompt = ChatPromptTemplate.from_messages(
        [
            ("system", ADVICE_SYSTEM),
            ("user", ADVICE_USER_TEMPLATE + "\nReturn JSON only.\n{format_instructions}"),
        ]
    ).partial(format_instructions=parser.get_format_instructions())
    return prompt | (llm or build_llm()) | parser


def request_advice(request: AdviceRequest, llm: Optional[BaseChatModel] = None) -> FoodAdvice:
    inputs: Dict[str, Any] = {"food_item": request.food_item, "question": request.question}
    try:
        chain = _build_chain(llm)
        advice: FoodAdvice = chain.invoke(inputs)
    except (OutputParserException, ValidationError) as exc:
        logger.error("Advice response did not match the expected shape: %s", exc)
        raise MalformedProviderResponseError("The advice service returned a malformed response.") from exc
    except RateLimitError as exc:
        error_msg = str(exc)
        if "insufficient_quota" in error_msg.lower():
            logger.error(
                "OpenAI quota/rate limit exceeded. "
                "Check your billing plan and spending limits. Error: %s",
                error_msg,
            )
            raise AdviceProviderError(
                "The AI service quota has been exceeded. Please check the OpenAI account settings."
            ) from exc
        logger.error("OpenAI rate limit error: %s", error_msg)
        raise AdviceProviderError("Rate limit exceeded. Please try again in a moment.") from exc
    except Exception as exc:  # noqa: BLE001
        logger.error("Advice generation failed: %s", exc, exc_info=True)
        raise AdviceProviderError(str(exc) or "Advice generation failed.") from exc

    logger.info("Generated advice for %r", request.food_item)
    return advice
