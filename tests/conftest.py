# Shared fixtures: settings, a fake dependency checker and an in-process HTTP client.
import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport
from lucid_gateway.core.config import Settings
from lucid_gateway.main import create_app
from tests.fakes import FakeChecker

VERIFY_TOKEN = "verify-token"


@pytest.fixture
def settings() -> Settings:
    return Settings(WHATSAPP_WEBHOOK_VERIFY_TOKEN=VERIFY_TOKEN, _env_file=None)


@pytest.fixture
def checker() -> FakeChecker:
    return FakeChecker()


@pytest.fixture
def app(settings, checker):
    return create_app(settings=settings, checker=checker)


@pytest_asyncio.fixture
async def client(app):
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac
