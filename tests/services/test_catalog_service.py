"""Catalog Service — custom program CRUD through the facade."""

import pytest

from microwave.core.errors import (
    DuplicateCharError, ProtectedProgramError, ReservedCharError,
)
from microwave.api.dependencies import build_container
from microwave.core.program_catalog import ProgramCatalog
from microwave.services.catalog_service import CatalogService


def _add(service, identifier="Z", char="%"):
    return service.add_program(
        identifier=identifier, name="Soup", food="Tomato soup",
        duration_seconds=100, power=8, progress_char=char,
        instructions="Stir halfway.",
    )


def test_add_program_returns_custom_snapshot(catalog_service):
    snap = _add(catalog_service, identifier="z")
    assert snap.identifier == "Z"
    assert snap.is_custom is True
    assert snap.duration_display == "1m 40s"
    assert catalog_service.get_program("Z") == snap


def test_add_program_with_taken_char(catalog_service):
    total = len(catalog_service.list_all())
    with pytest.raises(DuplicateCharError):
        _add(catalog_service, char="*")
    assert len(catalog_service.list_all()) == total


def test_add_program_with_reserved_char(catalog_service):
    with pytest.raises(ReservedCharError):
        _add(catalog_service, char=".")


def test_lists_split_custom_and_predefined(catalog_service):
    _add(catalog_service)
    assert [p.identifier for p in catalog_service.list_custom()] == ["Z"]
    assert all(not p.is_custom for p in catalog_service.list_predefined())
    assert len(catalog_service.list_all()) == len(catalog_service.list_predefined()) + 1


def test_remove_program(catalog_service):
    _add(catalog_service)
    catalog_service.remove_program("z")
    assert catalog_service.get_program("Z") is None


def test_remove_predefined_is_protected(catalog_service):
    with pytest.raises(ProtectedProgramError):
        catalog_service.remove_program("P")


def test_reload_reports_skipped_records(repository):
    service = CatalogService(ProgramCatalog(repository))
    _add(service)
    repository.records.append({"identifier": "Y"})
    assert service.reload() == 1
    assert service.get_program("Z") is not None


def test_container_loads_persisted_programs(settings, seeded_repository):
    container = build_container(settings, seeded_repository)
    snap = container.catalog.get_program("s")
    assert snap.name == "Soup"
    assert snap.is_custom is True
