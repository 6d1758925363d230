"""Chat messages held by a session.

Messages are frozen once created; a session only ever appends new ones.
"""
import uuid
from datetime import datetime, timezone
from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator

from food_assist.app.schemas import FoodAdvice

MessageKind = Literal["user", "ai", "error", "system"]

GREETING = (
    "Welcome to Food Assist! Ask me about any food item for storage tips, why those tips work, "
    "its health benefits, and a relevant YouTube video."
)


def _new_id() -> str:
    return str(uuid.uuid4())


def _now() -> datetime:
    return datetime.now(timezone.utc)


class ChatMessage(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str = Field(default_factory=_new_id)
    kind: MessageKind
    text: str = ""
    food_item: Optional[str] = None
    original_question: Optional[str] = None
    advice: Optional[str] = None
    reasoning: Optional[str] = None
    health_benefits: Optional[str] = None
    timestamp: datetime = Field(default_factory=_now)

    @model_validator(mode="after")
    def _fields_match_kind(self) -> "ChatMessage":
        if self.kind != "ai" and any(v is not None for v in (self.advice, self.reasoning, self.health_benefits)):
            raise ValueError(f"advice fields are only allowed on ai messages, got kind={self.kind}")
        if self.kind != "user" and (self.food_item is not None or self.original_question is not None):
            raise ValueError(f"food_item/original_question are only allowed on user messages, got kind={self.kind}")
        return self

    @property
    def has_advice(self) -> bool:
        return bool(self.advice or self.reasoning or self.health_benefits)


def user_message(food_item: str, question: str) -> ChatMessage:
    return ChatMessage(
        kind="user",
        text=f"{food_item}: {question}",
        food_item=food_item,
        original_question=question,
    )


def ai_message(advice: FoodAdvice) -> ChatMessage:
    return ChatMessage(
        kind="ai",
        advice=advice.storage_advice,
        reasoning=advice.reasoning,
        health_benefits=advice.health_benefits or None,
    )


def error_message(detail: str) -> ChatMessage:
    return ChatMessage(kind="error", text=f"Sorry, I encountered an error: {detail}")


def system_message(text: str = GREETING) -> ChatMessage:
    return ChatMessage(kind="system", text=text)
