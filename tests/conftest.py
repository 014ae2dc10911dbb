"""Root conftest — shared test configuration and core fixtures."""

import os

import pytest

# Tests never touch the real catalog file and never spawn background tickers
os.environ.setdefault("PERSIST_CATALOG", "false")
os.environ.setdefault("AUTO_TICK", "false")
os.environ.setdefault("LOG_FORMAT", "text")

from microwave.core.program_catalog import ProgramCatalog  # noqa: E402
from microwave.core.repository_protocols import InMemoryProgramRepository  # noqa: E402
from microwave.core.session_store import SessionStore  # noqa: E402


@pytest.fixture
def repository():
    return InMemoryProgramRepository()


@pytest.fixture
def catalog(repository):
    return ProgramCatalog(repository)


@pytest.fixture
def store():
    return SessionStore()
