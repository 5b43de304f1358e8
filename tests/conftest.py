from __future__ import annotations

import json
import logging
from typing import Callable

import httpx
import pytest
import pytest_asyncio
from fastapi import FastAPI

from fitcoach.ai.coach_client import AICoachClient
from fitcoach.api.deps import get_coach_client
from fitcoach.config import Settings, get_settings
from fitcoach.main import create_app


@pytest.fixture(autouse=True)
def _settings_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Set deterministic test env and reset cached Settings."""

    monkeypatch.setenv("DEBUG", "false")
    monkeypatch.setenv("LOG_LEVEL", "INFO")
    monkeypatch.setenv("GROQ_API_KEY", "test-groq-key")
    monkeypatch.delenv("VITE_GROQ_API_KEY", raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def coach_log(caplog: pytest.LogCaptureFixture) -> pytest.LogCaptureFixture:
    """Capture records of the coach client logger, which does not propagate."""

    coach_logger = logging.getLogger("fitcoach.ai.coach_client")
    coach_logger.addHandler(caplog.handler)
    yield caplog
    coach_logger.removeHandler(caplog.handler)


@pytest.fixture
def settings() -> Settings:
    return get_settings()


class RecordingVendor:
    """Mock chat-completions vendor that records every request it receives."""

    def __init__(self, reply: Callable[[httpx.Request], httpx.Response]) -> None:
        self._reply = reply
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return self._reply(request)

    @property
    def last_body(self) -> dict:
        return json.loads(self.requests[-1].content)

    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self)


@pytest.fixture
def vendor() -> Callable[[Callable[[httpx.Request], httpx.Response]], RecordingVendor]:
    """Build a recording vendor from a reply function."""

    return RecordingVendor


@pytest.fixture
def vendor_answering() -> Callable[[str], RecordingVendor]:
    """Build a vendor that answers 200 with a single completion."""

    def _factory(content: str) -> RecordingVendor:
        body = {"choices": [{"index": 0, "message": {"role": "assistant", "content": content}}]}
        return RecordingVendor(lambda _request: httpx.Response(200, json=body))

    return _factory


@pytest.fixture
def web_app() -> FastAPI:
    return create_app()


@pytest_asyncio.fixture
async def app_client(web_app: FastAPI) -> httpx.AsyncClient:
    """ASGI client for the whole app."""

    transport = httpx.ASGITransport(app=web_app)
    async with httpx.AsyncClient(transport=transport, base_url="http://testserver") as client:
        yield client


@pytest.fixture
def use_vendor(web_app: FastAPI, settings: Settings) -> Callable[[RecordingVendor], None]:
    """Route the app's coach client through a mock vendor."""

    def _apply(mock_vendor: RecordingVendor) -> None:
        web_app.dependency_overrides[get_coach_client] = lambda: AICoachClient(
            settings, transport=mock_vendor.transport()
        )

    return _apply
