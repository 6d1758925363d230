import re
from typing import List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class AdviceRequest(BaseModel):
    model_config = ConfigDict(str_strip_whitespace=True)

    food_item: str = Field(..., min_length=1, description="The food item to get advice for (e.g., apple, broccoli, bread).")
    question: str = Field(
        ...,
        min_length=5,
        description="The question about the food item: storage, preparation, or general queries.",
    )


class ChatRequest(AdviceRequest):
    model_config = ConfigDict(str_strip_whitespace=True, extra="ignore")

    session_id: str = Field(..., min_length=1)


class FoodAdvice(BaseModel):
    model_config = ConfigDict(str_strip_whitespace=True)

    storage_advice: str = Field(
        ..., min_length=1, description="Advice on how to handle or store the food item, formatted as bullet points."
    )
    reasoning: str = Field(..., min_length=1, description="The reasoning behind the advice, formatted as bullet points.")
    health_benefits: Optional[str] = Field(
        None, description="Key health benefits of the food item, formatted as bullet points."
    )

    @field_validator("storage_advice", "reasoning")
    @classmethod
    def _has_content(cls, value: str) -> str:
        if not re.search(r"[^\s*-]", value):
            raise ValueError("block has no text besides bullet markers")
        return value


class SearchQuery(BaseModel):
    search_query: str = Field(..., description="A concise and effective YouTube search query string.")


class VideoSuggestion(BaseModel):
    search_query: Optional[str] = None
    video_url: Optional[str] = None

    @property
    def tier(self) -> Literal["video", "search", "none"]:
        if self.video_url:
            return "video"
        if self.search_query:
            return "search"
        return "none"


class Section(BaseModel):
    label: str
    items: List[str]


class MessageView(BaseModel):
    id: str
    kind: str
    author: str
    text: str
    subtitle: Optional[str] = None
    sections: List[Section] = []
    speech_text: Optional[str] = None
    timestamp: str


class VideoPanel(BaseModel):
    tier: Literal["loading", "video", "search", "none"]
    heading: str
    video_url: Optional[str] = None
    video_title: Optional[str] = None
    search_query: Optional[str] = None
    search_url: Optional[str] = None
    hint: Optional[str] = None


class Notification(BaseModel):
    title: str
    description: str
    variant: Literal["default", "destructive"] = "default"
    duration_ms: int = 4000


class TokenUsage(BaseModel):
    prompt: int = 0
    completion: int = 0
    total: int = 0


class Meta(BaseModel):
    latency_ms: int = 0
    token_usage: TokenUsage = TokenUsage()
    cost_usd_estimate: float = 0.0


class SessionView(BaseModel):
    session_id: str
    is_loading: bool = False
    error: Optional[str] = None
    messages: List[MessageView] = []
    video: VideoPanel


class ChatResponse(SessionView):
    notification: Optional[Notification] = None
    meta: Meta = Meta()
