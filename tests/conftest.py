"""
Pytest configuration and shared fixtures.

Every test gets its own SQLite file under tmp_path, so tests never share
state. Fault injection is replaced by NoFaultPolicy unless a test asks for
something else.
"""

import pytest
import pytest_asyncio
from fastapi.testclient import TestClient

from talentflow.core.config import Settings
from talentflow.db.session import build_engine, build_session_maker, init_db
from talentflow.main import create_app
from talentflow.repositories.collections import Collection
from talentflow.repositories.entity_store import EntityStore
from talentflow.services.network import NetworkSimulator, NoFaultPolicy

SEED = 20240601


class AlwaysFailPolicy:
    """Every operation fails without delay."""

    def latency_ms(self, operation: str) -> float:
        return 0.0

    def should_fail(self, operation: str) -> bool:
        return True


class RecordingPolicy(NoFaultPolicy):
    """Never fails; remembers the operation names it was asked about."""

    def __init__(self):
        self.operations = []

    def should_fail(self, operation: str) -> bool:
        self.operations.append(operation)
        return False


def pytest_configure(config):
    config.addinivalue_line("markers", "unit: fast tests, no external deps")
    config.addinivalue_line("markers", "db: uses a temporary SQLite store")
    config.addinivalue_line("markers", "api: exercises the HTTP surface through TestClient")


@pytest.fixture
def test_settings(tmp_path) -> Settings:
    return Settings(
        DATABASE_URL=f"sqlite+aiosqlite:///{tmp_path / 'talentflow-test.db'}",
        SEED_ON_STARTUP=False,
        FAULT_INJECTION_ENABLED=False,
    )


@pytest_asyncio.fixture
async def store(test_settings):
    engine = build_engine(test_settings)
    await init_db(engine, [collection.value for collection in Collection])
    yield EntityStore(build_session_maker(engine))
    await engine.dispose()


@pytest.fixture
def network() -> NetworkSimulator:
    return NetworkSimulator(NoFaultPolicy())


@pytest.fixture
def client(test_settings):
    app = create_app(test_settings, fault_policy=NoFaultPolicy())
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def seeded_client(test_settings):
    settings = test_settings.model_copy(update={"SEED_ON_STARTUP": True, "SEED_RANDOM_SEED": SEED})
    app = create_app(settings, fault_policy=NoFaultPolicy())
    with TestClient(app) as test_client:
        yield test_client
