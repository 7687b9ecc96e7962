# tests/conftest.py
"""
Shared pytest fixtures for Inator Studio tests.

Provides:
- Settings pointed at a temporary storage directory
- An app built from those settings, with or without a Gemini key
- An httpx AsyncClient bound to the app
- A patched Gemini provider call
"""
import pytest
from pathlib import Path
from unittest.mock import AsyncMock, patch

from faker import Faker
from httpx import AsyncClient, ASGITransport

from inator_studio.core.config import Settings, LLMSettings, StorageSettings, PathSettings
from inator_studio.main import create_app


fake = Faker()


# ═══════════════════════════════════════════════════════
# FIXTURES - Settings
# ═══════════════════════════════════════════════════════

@pytest.fixture
def storage_dir(tmp_path) -> Path:
    """Storage directory that does not exist yet."""
    return tmp_path / "storage"


@pytest.fixture
def frontend_index(tmp_path) -> Path:
    index = tmp_path / "index.html"
    index.write_text("<!DOCTYPE html><title>Inator Studio</title>", encoding="utf-8")
    return index


def _settings(storage_dir: Path, frontend_index: Path, api_key) -> Settings:
    return Settings(
        llm=LLMSettings(gemini_api_key=api_key, default_model="gemini-test", timeout_seconds=None),
        storage=StorageSettings(storage_dir=storage_dir),
        paths=PathSettings(frontend_index=frontend_index),
    )


@pytest.fixture
def settings(storage_dir, frontend_index) -> Settings:
    return _settings(storage_dir, frontend_index, "test-key")


@pytest.fixture
def unconfigured_settings(storage_dir, frontend_index) -> Settings:
    return _settings(storage_dir, frontend_index, None)


# ═══════════════════════════════════════════════════════
# FIXTURES - App / Client
# ═══════════════════════════════════════════════════════

@pytest.fixture
def app(settings):
    return create_app(settings)


@pytest.fixture
async def async_client(app):
    """Async HTTP client for testing FastAPI endpoints."""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client


@pytest.fixture
async def unconfigured_client(unconfigured_settings):
    transport = ASGITransport(app=create_app(unconfigured_settings))
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client


# ═══════════════════════════════════════════════════════
# FIXTURES - Mock LLM
# ═══════════════════════════════════════════════════════

@pytest.fixture
def gemini_call():
    """Patch the Gemini provider call. Default reply is a fixed name."""
    with patch(
        "inator_studio.llm.providers.gemini.call",
        new=AsyncMock(return_value="The Procrastinate-inator"),
    ) as mock:
        yield mock


@pytest.fixture
def inator_input():
    """Realistic title/description pair."""
    return {
        "title": fake.catch_phrase(),
        "description": fake.paragraph(nb_sentences=2),
    }
