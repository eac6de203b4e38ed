"""Pytest configuration and fixtures."""

import json
from collections.abc import AsyncGenerator, Callable

import httpx
import pytest
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient

from gate_tutor.config import Settings
from gate_tutor.db.base import Base
from gate_tutor.main import create_app


class FakeGemini:
    """Stand-in for the generateContent endpoint that records what it receives."""

    def __init__(self) -> None:
        self.requests: list[httpx.Request] = []
        self.status_code = 200
        self.body: object = {
            "candidates": [{"content": {"parts": [{"text": "What does Ohm's law relate?"}]}}]
        }
        self.raise_error: Exception | None = None

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.raise_error is not None:
            raise self.raise_error
        if isinstance(self.body, str):
            return httpx.Response(self.status_code, text=self.body)
        return httpx.Response(self.status_code, json=self.body)

    @property
    def last_payload(self) -> dict:
        return json.loads(self.requests[-1].content)

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handler)


@pytest.fixture
def fake_gemini() -> FakeGemini:
    return FakeGemini()


@pytest.fixture
def settings(tmp_path) -> Settings:
    return Settings(
        _env_file=None,
        database_url=f"sqlite+aiosqlite:///{tmp_path / 'test.db'}",
        gemini_api_key="test-key",
    )


@pytest.fixture
def make_client(
    fake_gemini: FakeGemini,
) -> Callable[..., AsyncGenerator[AsyncClient, None]]:
    """Factory for clients bound to an app built from the given settings."""

    async def _make(
        app_settings: Settings, create_schema: bool = True
    ) -> AsyncGenerator[AsyncClient, None]:
        app: FastAPI = create_app(app_settings, http_transport=fake_gemini.transport)
        # ASGITransport does not run lifespan events, so enter it explicitly
        async with app.router.lifespan_context(app):
            engine = app.state.context.engine
            if create_schema and engine is not None:
                async with engine.begin() as conn:
                    await conn.run_sync(Base.metadata.create_all)
            async with AsyncClient(
                transport=ASGITransport(app=app),
                base_url="http://test",
            ) as ac:
                yield ac

    return _make


@pytest.fixture
async def client(make_client, settings) -> AsyncGenerator[AsyncClient, None]:
    """Async HTTP client for testing FastAPI endpoints."""
    async for ac in make_client(settings):
        yield ac
