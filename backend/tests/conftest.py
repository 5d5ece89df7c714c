"""Shared fixtures: explicit settings, fake Supabase client and a recording toast sink."""

from __future__ import annotations

from collections.abc import AsyncIterator, Iterator

import httpx
import pytest
from fastapi.testclient import TestClient

from backend.app.core.config import Settings
from backend.app.main import create_app
from backend.app.services.providers.steam import SteamProvider

from .fakes import FakeIdentityClient, RecordingToastSink


@pytest.fixture
def settings() -> Settings:
    return Settings(
        SUPABASE_URL="https://project-ref.supabase.co",
        SUPABASE_KEY="test-anon-key",
        _env_file=None,
    )


@pytest.fixture
def identity_client() -> FakeIdentityClient:
    return FakeIdentityClient()


@pytest.fixture
def toast_sink() -> RecordingToastSink:
    return RecordingToastSink()


@pytest.fixture
def client(
    settings: Settings, identity_client: FakeIdentityClient, toast_sink: RecordingToastSink
) -> Iterator[TestClient]:
    """TestClient running the full lifespan with injected collaborators."""
    app = create_app(settings=settings, identity_client=identity_client, toast_sink=toast_sink)
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
async def steam_provider() -> AsyncIterator[SteamProvider]:
    """Provider backed by a plain httpx client so respx can intercept it."""
    async with httpx.AsyncClient() as http_client:
        yield SteamProvider(client=http_client)
