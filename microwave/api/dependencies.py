"""API Dependencies — process-scoped service container exposed to routes.

Invariants:
    - Exactly one SessionStore, ProgramCatalog, and TickDriver per process
    - Routes obtain services only through these dependencies (overridable in tests)

Design Decisions:
    - lru_cache'd container over module-level globals: built lazily on first request,
      reset in tests via get_container.cache_clear() or dependency_overrides
"""

from dataclasses import dataclass
from functools import lru_cache

from microwave.config import Settings, get_settings
from microwave.core.program_catalog import ProgramCatalog
from microwave.core.repository_protocols import (
    InMemoryProgramRepository, ProgramRepository,
)
from microwave.core.session_store import SessionStore
from microwave.infrastructure.json_program_repository import JsonProgramRepository
from microwave.services.catalog_service import CatalogService
from microwave.services.session_service import SessionService
from microwave.services.tick_driver import TickDriver


@dataclass
class ServiceContainer:
    settings: Settings
    sessions: SessionService
    catalog: CatalogService
    ticker: TickDriver


def build_container(
    settings: Settings, repository: ProgramRepository | None = None,
) -> ServiceContainer:
    """Wire stores and services. Startup and tests both go through here."""
    if repository is None:
        repository = (
            JsonProgramRepository(settings.catalog_file)
            if settings.persist_catalog
            else InMemoryProgramRepository()
        )
    catalog = ProgramCatalog(repository)
    sessions = SessionService(
        SessionStore(),
        catalog,
        add_time_step_seconds=settings.add_time_step_seconds,
        quick_start_seconds=settings.quick_start_seconds,
        quick_start_power=settings.quick_start_power,
    )
    return ServiceContainer(
        settings=settings,
        sessions=sessions,
        catalog=CatalogService(catalog),
        ticker=TickDriver(sessions, settings.tick_interval_seconds),
    )


@lru_cache
def get_container() -> ServiceContainer:
    return build_container(get_settings())


def get_session_service() -> SessionService:
    return get_container().sessions


def get_catalog_service() -> CatalogService:
    return get_container().catalog


def get_tick_driver() -> TickDriver | None:
    """None when auto-ticking is disabled — callers then drive ticks themselves."""
    container = get_container()
    return container.ticker if container.settings.auto_tick else None
