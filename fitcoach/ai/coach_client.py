"""Fitness coach client for the Groq chat-completions API."""

from __future__ import annotations

from typing import Any, Optional

import httpx

from fitcoach.ai.prompts import COACH_SYSTEM_PROMPT, ERROR_TEXT, NO_ANSWER_TEXT
from fitcoach.api.errors import AIRequestError
from fitcoach.config import Settings, get_settings
from fitcoach.schemas.ai import ChatCompletionRequest, ChatMessage
from fitcoach.utils.logger import get_logger

GROQ_CHAT_COMPLETIONS_URL = "https://api.groq.com/openai/v1/chat/completions"
COACH_MODEL = "llama-3.1-8b-instant"

logger = get_logger(__name__)


def build_chat_request(message: str) -> ChatCompletionRequest:
    """Return the two-turn request body for one user message."""

    return ChatCompletionRequest(
        model=COACH_MODEL,
        messages=[
            ChatMessage(role="system", content=COACH_SYSTEM_PROMPT),
            ChatMessage(role="user", content=message),
        ],
    )


def _extract_answer(data: Any) -> Optional[str]:
    """Return ``choices[0].message.content`` or None when any part is missing."""

    if not isinstance(data, dict):
        return None
    choices = data.get("choices")
    if not isinstance(choices, list) or not choices:
        return None
    first = choices[0]
    if not isinstance(first, dict):
        return None
    message = first.get("message")
    if not isinstance(message, dict):
        return None
    content = message.get("content")
    if not isinstance(content, str) or not content:
        return None
    return content


class AICoachClient:
    """Ask the fitness coach persona a question and get a text reply.

    Each call sends exactly one request, with no retries and no caching. The
    API key is taken from the ``Settings`` passed at construction; ``transport``
    lets callers swap the HTTP transport (tests use ``httpx.MockTransport``).
    """

    def __init__(self, settings: Settings, transport: Optional[httpx.AsyncBaseTransport] = None) -> None:
        self._api_key = settings.groq_api_key
        self._transport = transport

    def _headers(self) -> dict[str, str]:
        return {
            "Content-Type": "application/json",
            "Authorization": f"Bearer {self._api_key}",
        }

    async def _request_completion(self, message: str) -> str:
        """Send one chat completion request; raise on any failure."""

        payload = build_chat_request(message).model_dump()

        async with httpx.AsyncClient(transport=self._transport) as client:
            response = await client.post(GROQ_CHAT_COMPLETIONS_URL, json=payload, headers=self._headers())

            if response.is_error:
                raise AIRequestError(response.status_code, response.text)

            data = response.json()

        if data is None:
            raise ValueError("AI response body is JSON null")

        answer = _extract_answer(data)
        if answer is None:
            return NO_ANSWER_TEXT
        return answer

    async def ask(self, message: str) -> str:
        """Return the coach's reply to ``message``; never raises.

        Transport failures, vendor rejections and malformed replies are logged
        and collapse into ``ERROR_TEXT``.
        """

        logger.debug("Sending coach request (%d chars)", len(message))
        try:
            return await self._request_completion(message)
        except Exception as exc:  # noqa: BLE001
            logger.error("AI request failed: %s", exc)
            return ERROR_TEXT


async def ask_ai(
    message: str,
    settings: Optional[Settings] = None,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> str:
    """Ask the coach using process-wide settings unless others are given."""

    client = AICoachClient(settings or get_settings(), transport=transport)
    return await client.ask(message)
