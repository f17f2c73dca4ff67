import httpx
import pytest
from httpx import ASGITransport


@pytest.fixture
def mock_env(monkeypatch):
    monkeypatch.setenv("GOOGLE_MAPS_API_KEY", "test-key")
    monkeypatch.setenv("ENRICHMENT_DELAY", "0")
    monkeypatch.setenv("MAX_ENRICH_LEADS", "20")


@pytest.fixture
async def client(mock_env):
    from app.main import app, lifespan

    async with lifespan(app):
        async with httpx.AsyncClient(
            transport=ASGITransport(app=app),
            base_url="http://test",
        ) as c:
            yield c
