"""Turns session state into the JSON view drawn by the chat UI."""
import re
from typing import Iterable, List, Optional

from food_assist.app.schemas import MessageView, Notification, Section, SessionView, VideoPanel, VideoSuggestion
from food_assist.app.speech import speech_text
from food_assist.session.messages import ChatMessage
from food_assist.session.state import SessionState
from food_assist.tools.youtube_client import extract_video_id, search_url

# Models sometimes emit the two characters "\n" instead of a newline
_LINE_BREAK = re.compile(r"\r?\n|\\n")
_BULLET = re.compile(r"^[-*](?:\s+|$)")

_AUTHORS = {
    "user": "You",
    "ai": "Food Assist AI",
    "error": "Error",
    "system": "Food Assist Guide",
}


def split_bullets(block: Optional[str]) -> List[str]:
    if not block:
        return []
    items = []
    for line in _LINE_BREAK.split(block):
        item = _BULLET.sub("", line.strip(), count=1).strip()
        if item:
            items.append(item)
    return items


def _sections(msg: ChatMessage) -> List[Section]:
    sections = []
    for label, block in (
        ("Advice", msg.advice),
        ("Reasoning", msg.reasoning),
        ("Health Benefits", msg.health_benefits),
    ):
        items = split_bullets(block)
        if items:
            sections.append(Section(label=label, items=items))
    return sections


def render_message(msg: ChatMessage) -> MessageView:
    subtitle = None
    if msg.kind == "user" and msg.food_item and msg.original_question:
        subtitle = f'Asked about: {msg.food_item} - "{msg.original_question}"'
    return MessageView(
        id=msg.id,
        kind=msg.kind,
        author=_AUTHORS[msg.kind],
        text=msg.text,
        subtitle=subtitle,
        sections=_sections(msg) if msg.kind == "ai" else [],
        speech_text=speech_text(msg) if msg.kind == "ai" else None,
        timestamp=msg.timestamp.isoformat(),
    )


def render_video_panel(video: VideoSuggestion, is_loading: bool = False) -> VideoPanel:
    if is_loading:
        return VideoPanel(tier="loading", heading="Searching for video...")
    if video.tier == "video":
        video_id = extract_video_id(video.video_url)
        return VideoPanel(
            tier="video",
            heading="Here's a related video:",
            video_url=video.video_url,
            video_title=f"YouTube Video: {video_id}" if video_id else video.video_url,
            search_query=video.search_query,
        )
    if video.tier == "search":
        return VideoPanel(
            tier="search",
            heading="No direct video match found for the query:",
            search_query=video.search_query,
            search_url=search_url(video.search_query),
            hint="You can also try a broader question in the chat.",
        )
    return VideoPanel(tier="none", heading="Ask a question to get a YouTube video suggestion!")


def notification_for(state: SessionState) -> Optional[Notification]:
    """The transient toast for the outcome of the latest submission."""
    last = state.last_message
    if state.is_loading or last is None:
        return None
    if last.kind == "error":
        return Notification(
            title="Error",
            description="Could not process your request.",
            variant="destructive",
            duration_ms=5000,
        )
    if last.kind != "ai":
        return None
    if state.video.tier == "video":
        return Notification(
            title="Related YouTube Video Found!",
            description="Check the 'Related Video' section.",
            duration_ms=4000,
        )
    if state.video.tier == "search":
        return Notification(
            title="Video Suggestion",
            description="We couldn't find a direct video match. You can try the generated search query on YouTube.",
            duration_ms=5000,
        )
    return Notification(
        title="YouTube Search",
        description="Could not generate a YouTube video suggestion for this query.",
        duration_ms=4000,
    )


def render_session(state: SessionState) -> SessionView:
    return SessionView(
        session_id=state.session_id,
        is_loading=state.is_loading,
        error=state.error,
        messages=[render_message(m) for m in state.messages],
        video=render_video_panel(state.video, is_loading=state.is_loading),
    )


def format_history(messages: Iterable[ChatMessage]) -> str:
    lines = []
    for msg in messages:
        if msg.kind == "user":
            lines.append(f"User: (Food: {msg.food_item}) {msg.original_question}")
        elif msg.kind == "ai":
            lines.append(f"AI: (Advice: {msg.advice}) (Reasoning: {msg.reasoning})")
    return "\n".join(lines)
