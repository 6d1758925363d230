"""Text handed to the browser's speech synthesis.

Playback itself happens client side (see static/index.html); the server only
decides what an answer sounds like.
"""
from typing import Optional

from food_assist.session.messages import ChatMessage


def speech_text(msg: ChatMessage) -> Optional[str]:
    parts = []
    if msg.advice:
        parts.append(f"Advice: {msg.advice}.")
    if msg.reasoning:
        parts.append(f"Reasoning: {msg.reasoning}.")
    if msg.health_benefits:
        parts.append(f"Health Benefits: {msg.health_benefits}.")
    text = " ".join(parts).strip()
    if text:
        return text
    return msg.text or None
