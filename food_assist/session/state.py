"""Session state and the reducer that advances it.

A session is an immutable snapshot. Every user action or provider outcome is an
event; ``reduce`` returns the next snapshot and never mutates the old one.
"""
from typing import Tuple, Union

from pydantic import BaseModel, ConfigDict, Field

from food_assist.app.errors import InvalidTransitionError, SubmissionInFlightError
from food_assist.app.schemas import FoodAdvice, VideoSuggestion
from food_assist.session.messages import ChatMessage, ai_message, error_message, system_message, user_message


class SessionState(BaseModel):
    model_config = ConfigDict(frozen=True)

    session_id: str
    messages: Tuple[ChatMessage, ...] = ()
    is_loading: bool = False
    error: str | None = None
    pending_id: str | None = None  # id of the user message awaiting an answer
    video: VideoSuggestion = Field(default_factory=VideoSuggestion)

    @classmethod
    def new(cls, session_id: str) -> "SessionState":
        return cls(session_id=session_id, messages=(system_message(),))

    @property
    def last_message(self) -> ChatMessage | None:
        return self.messages[-1] if self.messages else None


class Submitted(BaseModel):
    model_config = ConfigDict(frozen=True)

    food_item: str
    question: str


class AdviceReceived(BaseModel):
    model_config = ConfigDict(frozen=True)

    advice: FoodAdvice
    video: VideoSuggestion = Field(default_factory=VideoSuggestion)


class SubmissionFailed(BaseModel):
    model_config = ConfigDict(frozen=True)

    detail: str


Event = Union[Submitted, AdviceReceived, SubmissionFailed]


def reduce(state: SessionState, event: Event) -> SessionState:
    if isinstance(event, Submitted):
        if state.is_loading:
            raise SubmissionInFlightError(f"session {state.session_id} already has a submission in flight")
        asked = user_message(event.food_item, event.question)
        return state.model_copy(
            update={
                "messages": state.messages + (asked,),
                "is_loading": True,
                "pending_id": asked.id,
                "error": None,
                "video": VideoSuggestion(),
            }
        )

    if not state.is_loading:
        raise InvalidTransitionError(f"{type(event).__name__} received with no submission in flight")

    if isinstance(event, AdviceReceived):
        return state.model_copy(
            update={
                "messages": state.messages + (ai_message(event.advice),),
                "is_loading": False,
                "pending_id": None,
                "video": event.video,
            }
        )

    if isinstance(event, SubmissionFailed):
        return state.model_copy(
            update={
                "messages": state.messages + (error_message(event.detail),),
                "is_loading": False,
                "pending_id": None,
                "error": event.detail,
            }
        )

    raise InvalidTransitionError(f"unknown event type: {type(event).__name__}")
