"""Service test fixtures — wired services + FastAPI test client.

Invariants:
    - Every test gets a fresh container: empty session store, seeded catalog,
      in-memory program repository, auto-ticking off
    - Route dependencies overridden to point at that container

Design Decisions:
    - Overrides on the four provider functions, not on module state: routes stay
      unaware of tests
    - ASGITransport skips the lifespan; the container does not need it
"""

import pytest
from httpx import ASGITransport, AsyncClient

from microwave.api import dependencies
from microwave.config import Settings
from microwave.core.repository_protocols import InMemoryProgramRepository
from microwave.main import app


@pytest.fixture
def settings():
    return Settings(
        persist_catalog=False, auto_tick=False, tick_interval_seconds=0.01,
    )


@pytest.fixture
def container(settings, repository):
    return dependencies.build_container(settings, repository)


@pytest.fixture
def session_service(container):
    return container.sessions


@pytest.fixture
def catalog_service(container):
    return container.catalog


@pytest.fixture
async def client(container):
    """FastAPI test client with service dependencies overridden."""
    app.dependency_overrides[dependencies.get_container] = lambda: container
    app.dependency_overrides[dependencies.get_session_service] = lambda: container.sessions
    app.dependency_overrides[dependencies.get_catalog_service] = lambda: container.catalog
    app.dependency_overrides[dependencies.get_tick_driver] = lambda: None

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()


@pytest.fixture
def seeded_repository():
    """Repository that already holds one persisted custom program."""
    return InMemoryProgramRepository([
        {
            "identifier": "S",
            "name": "Soup",
            "food": "Soup",
            "duration_seconds": 100,
            "power": 8,
            "progress_char": "%",
            "instructions": "",
        },
    ])
