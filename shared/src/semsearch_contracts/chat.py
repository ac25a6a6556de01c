"""Chat contracts.

The transcript is owned by the client; the router only reads the last message and
answers with a single assistant message.
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, Field


class MessageRole(str, Enum):
    user = "user"
    assistant = "assistant"


class Message(BaseModel):
    role: MessageRole
    content: str


class ChatRequest(BaseModel):
    # Emptiness is checked by the endpoint so it can answer with ChatErrorResponse.
    messages: list[Message] | None = Field(default=None)


class ChatErrorResponse(BaseModel):
    """Structured error body for failures that cannot be expressed as a chat turn."""

    error: str
    detail: list[dict] | None = None
