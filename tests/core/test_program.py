"""Program — shape validation, instantiation, and record conversion.

Tests cover:
    - Identifier normalized to upper case; must be one character
    - Progress char must be one non-whitespace character
    - instantiate() builds independent IDLE sessions, bypassing the 120s ceiling
    - to_record/from_record preserve every field
"""

from datetime import datetime, timezone

import pytest

from microwave.core.domain_types import HeatingState
from microwave.core.errors import InvalidProgramError, OutOfRangeError
from microwave.core.program import Program, normalize_identifier


def _program(**overrides) -> Program:
    fields = dict(
        identifier="x", name="Pizza", food="Leftover pizza",
        duration_seconds=90, power=6, progress_char="%",
        instructions="Place on a plate.",
    )
    fields.update(overrides)
    return Program.create(**fields)


def test_identifier_normalized_to_upper():
    assert _program().identifier == "X"
    assert normalize_identifier(" q ") == "Q"


@pytest.mark.parametrize("identifier", ["", "AB", None, 5])
def test_identifier_must_be_single_character(identifier):
    with pytest.raises(InvalidProgramError) as exc:
        _program(identifier=identifier)
    assert exc.value.field == "identifier"


@pytest.mark.parametrize("char", ["", "%%", " "])
def test_progress_char_must_be_single_visible_character(char):
    with pytest.raises(InvalidProgramError) as exc:
        _program(progress_char=char)
    assert exc.value.field == "progress_char"


def test_name_cannot_be_blank():
    with pytest.raises(InvalidProgramError):
        _program(name="   ")


@pytest.mark.parametrize("field", ["food", "instructions"])
def test_food_and_instructions_must_be_text(field):
    with pytest.raises(InvalidProgramError) as exc:
        _program(**{field: 5})
    assert exc.value.field == field


def test_missing_food_and_instructions_default_to_empty():
    program = _program(food=None, instructions=None)
    assert program.food == ""
    assert program.instructions == ""


def test_power_and_duration_validated():
    with pytest.raises(OutOfRangeError):
        _program(power=11)
    with pytest.raises(OutOfRangeError):
        _program(duration_seconds=0)


def test_long_duration_allowed():
    assert _program(duration_seconds=900).duration.seconds == 900


def test_instantiate_builds_idle_session_with_program_char():
    program = _program(duration_seconds=180, power=7, progress_char="*")
    session = program.instantiate(42)
    assert session.id == 42
    assert session.state is HeatingState.IDLE
    assert session.total_seconds == 180
    assert session.power.value == 7
    assert session.progress_char == "*"


def test_instantiate_returns_independent_sessions():
    program = _program()
    first = program.instantiate(1)
    second = program.instantiate(2)
    first.start()
    first.tick()
    assert second.state is HeatingState.IDLE
    assert second.remaining_seconds == 90


def test_record_roundtrip_preserves_fields():
    created = datetime(2025, 3, 4, 5, 6, 7, tzinfo=timezone.utc)
    program = _program(created_at=created)
    record = program.to_record()
    assert record["identifier"] == "X"
    assert record["duration_seconds"] == 90
    assert Program.from_record(record) == program


def test_from_record_requires_core_fields():
    with pytest.raises(KeyError):
        Program.from_record({"identifier": "Z", "name": "No time"})


def test_snapshot_exposes_display_duration():
    snap = _program(duration_seconds=125).snapshot()
    assert snap.duration_display == "2m 5s"
    assert snap.is_custom is True
