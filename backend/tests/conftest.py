"""Root conftest - shared fixtures for app, client and stores.

Invariants:
    - Every test gets its own data file under tmp_path (never the real data.json)
    - Rate limiting disabled by default; tests that need it build their own app
    - httpx AsyncClient talks to the ASGI app in-process (no network)
"""

import pytest
from httpx import ASGITransport, AsyncClient

from zodiac_api.config import Settings
from zodiac_api.infrastructure.entry_store import JsonFileEntryStore
from zodiac_api.main import create_app


@pytest.fixture
def data_file(tmp_path):
    return tmp_path / "data.json"


@pytest.fixture
def settings(data_file):
    return Settings(
        data_file=str(data_file),
        rate_limit_enabled=False,
        log_format="text",
    )


@pytest.fixture
def app(settings):
    return create_app(settings)


@pytest.fixture
async def client(app):
    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c


@pytest.fixture
def store(data_file):
    return JsonFileEntryStore(data_file)
