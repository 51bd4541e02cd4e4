# tests/conftest.py
import os
import logging
import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport

# Ensure test-friendly env: no real keys, known defaults
os.environ["GEMINI_API_KEY"] = ""
os.environ["SARVAM_API_KEY"] = ""
os.environ.setdefault("DEFAULT_MODEL", "gemini")
os.environ.setdefault("SARVAM_URL", "https://api.sarvam.ai/v1/chat/completions")

# IMPORTANT: import the app after envs are set
from app.main import app as fastapi_app


@pytest_asyncio.fixture
async def app():
    return fastapi_app

@pytest_asyncio.fixture
async def client(app):
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac

@pytest.fixture
def no_keys(monkeypatch):
    monkeypatch.delenv("GEMINI_API_KEY", raising=False)
    monkeypatch.delenv("SARVAM_API_KEY", raising=False)

@pytest.fixture
def caplog_info(caplog):
    caplog.set_level(logging.INFO)
    return caplog

@pytest.fixture(autouse=True)
def fresh_gemini_clients(monkeypatch):
    # every test starts without cached SDK clients
    from app.providers import gemini
    monkeypatch.setattr(gemini, "_CLIENT_CACHE", {})
