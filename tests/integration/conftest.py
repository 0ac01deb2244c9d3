import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from config import ApplicationConfig
from safemesh.api.app import create_app
from safemesh.depends import build_console, create_engine, prepare_database
from tests.fixtures.clock import FakeClock
from tests.fixtures.json_loader import TestDataLoader


class IntegrationConfig(ApplicationConfig):
    DB_URI = "sqlite+aiosqlite:///:memory:"
    BCRYPT_ROUNDS = 4
    SEED_DEMO_DATA = True


@pytest_asyncio.fixture
def config():
    return IntegrationConfig


@pytest_asyncio.fixture
def test_data():
    return TestDataLoader()


@pytest_asyncio.fixture
def clock():
    return FakeClock()


@pytest_asyncio.fixture
async def engine(config):
    engine = create_engine(config)
    await prepare_database(config, engine)
    yield engine
    await engine.dispose()


@pytest_asyncio.fixture
async def console(config, engine, clock):
    return build_console(config, engine, clock=clock)


@pytest_asyncio.fixture
async def client(config, console):
    app = create_app(config, console=console)

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


@pytest_asyncio.fixture
async def auth_headers(client, test_data):
    response = await client.post("/auth/login", json=test_data.get_copy("admin_credentials"))
    assert response.status_code == 200
    return {"Authorization": f"Bearer {response.json()['token']}"}
