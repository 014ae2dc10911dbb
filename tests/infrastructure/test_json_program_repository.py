"""JSON Program Repository — best-effort load/save against a local file.

Tests cover:
    - Missing file, corrupt JSON, and non-list payloads load as []
    - Save creates parent dirs and writes a list the catalog can reload
    - Save failures are logged, never raised
"""

import json
import logging

from microwave.core.program import Program
from microwave.core.program_catalog import ProgramCatalog
from microwave.infrastructure.json_program_repository import JsonProgramRepository


def _record(identifier="Z", char="%"):
    return Program.create(identifier, "Soup", "Soup", 100, 8, char).to_record()


def test_missing_file_loads_empty(tmp_path):
    repo = JsonProgramRepository(tmp_path / "nope.json")
    assert repo.load_custom_programs() == []


def test_corrupt_file_loads_empty(tmp_path, caplog):
    path = tmp_path / "programs.json"
    path.write_text("{not json", encoding="utf-8")
    with caplog.at_level(logging.WARNING):
        assert JsonProgramRepository(path).load_custom_programs() == []
    assert "unreadable" in caplog.text


def test_undecodable_file_loads_empty(tmp_path, caplog):
    path = tmp_path / "programs.json"
    path.write_bytes(b'[{"identifier": "\xff"}]')
    with caplog.at_level(logging.WARNING):
        assert JsonProgramRepository(path).load_custom_programs() == []
    assert "unreadable" in caplog.text


def test_catalog_starts_when_file_is_undecodable(tmp_path):
    path = tmp_path / "programs.json"
    path.write_bytes(b"\xff\xfe garbage")
    catalog = ProgramCatalog(JsonProgramRepository(path))
    assert catalog.list_custom() == []
    assert len(catalog) == 5


def test_non_list_payload_loads_empty(tmp_path):
    path = tmp_path / "programs.json"
    path.write_text(json.dumps({"identifier": "Z"}), encoding="utf-8")
    assert JsonProgramRepository(path).load_custom_programs() == []


def test_save_creates_directories_and_roundtrips(tmp_path):
    path = tmp_path / "nested" / "dir" / "programs.json"
    repo = JsonProgramRepository(path)
    repo.save_custom_programs([_record()])
    assert path.exists()
    assert repo.load_custom_programs()[0]["identifier"] == "Z"
    assert list(path.parent.glob(".programs-*")) == []


def test_save_failure_is_logged_not_raised(tmp_path, caplog):
    blocker = tmp_path / "blocker"
    blocker.write_text("file, not a directory", encoding="utf-8")
    repo = JsonProgramRepository(blocker / "programs.json")
    with caplog.at_level(logging.ERROR):
        repo.save_custom_programs([_record()])
    assert "Failed to save" in caplog.text


def test_catalog_survives_restart_through_file(tmp_path):
    path = tmp_path / "programs.json"
    first = ProgramCatalog(JsonProgramRepository(path))
    first.add(Program.create("z", "Soup", "Soup", 100, 8, "%"))

    second = ProgramCatalog(JsonProgramRepository(path))
    assert second.get("Z").name == "Soup"
    assert second.get("Z").is_custom


def test_catalog_with_corrupt_file_starts_with_predefined_only(tmp_path):
    path = tmp_path / "programs.json"
    path.write_text("[[[", encoding="utf-8")
    catalog = ProgramCatalog(JsonProgramRepository(path))
    assert catalog.list_custom() == []
    assert len(catalog.list_predefined()) == 5
