"""Schemas for the AI coach exchange."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field, field_validator


class ChatMessage(BaseModel):
    """One conversation turn sent to the chat-completions API."""

    role: Literal["system", "user"]
    content: str


class ChatCompletionRequest(BaseModel):
    """Request body for the vendor chat-completions endpoint."""

    model: str
    messages: list[ChatMessage]


class AskRequest(BaseModel):
    """Message typed by the user in the coach chat box."""

    message: str = Field(min_length=1, max_length=4000)

    @field_validator("message")
    @classmethod
    def validate_message(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("message must not be blank")
        return value


class AskResponse(BaseModel):
    answer: str
