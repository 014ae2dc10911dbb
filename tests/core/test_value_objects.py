"""Value Objects — Power and Duration bounds.

Tests cover:
    - Power(v) succeeds iff 1 <= v <= 10
    - Duration(s) succeeds iff 1 <= s <= 120 in normal mode
    - Bypass mode accepts long durations but still rejects non-positive ones
    - Non-integer input rejected with OutOfRangeError naming the value
    - Immutability
"""

import dataclasses

import pytest

from microwave.core.errors import OutOfRangeError
from microwave.core.value_objects import Duration, Power


# ─── Power ───────────────────────────────────────────────────────

@pytest.mark.parametrize("value", range(1, 11))
def test_power_accepts_every_value_in_band(value):
    assert Power(value).value == value


@pytest.mark.parametrize("value", [-1, 0, 11, 100])
def test_power_rejects_out_of_band(value):
    with pytest.raises(OutOfRangeError) as exc:
        Power(value)
    assert exc.value.field == "power"
    assert exc.value.value == value
    assert exc.value.code == "OUT_OF_RANGE"


@pytest.mark.parametrize("value", [5.0, "5", True, None])
def test_power_rejects_non_integers(value):
    with pytest.raises(OutOfRangeError):
        Power(value)


def test_power_str_is_plain_number():
    assert str(Power(7)) == "7"


def test_power_is_immutable():
    power = Power(3)
    with pytest.raises(dataclasses.FrozenInstanceError):
        power.value = 4


# ─── Duration ────────────────────────────────────────────────────

@pytest.mark.parametrize("seconds", [1, 30, 60, 119, 120])
def test_duration_accepts_normal_band(seconds):
    assert Duration(seconds).seconds == seconds


@pytest.mark.parametrize("seconds", [-5, 0, 121, 300])
def test_duration_rejects_outside_normal_band(seconds):
    with pytest.raises(OutOfRangeError) as exc:
        Duration(seconds)
    assert exc.value.field == "duration_seconds"
    assert exc.value.maximum == 120


@pytest.mark.parametrize("seconds", [121, 180, 840, 3600])
def test_duration_bypass_allows_long_programs(seconds):
    assert Duration(seconds, bypass=True).seconds == seconds


@pytest.mark.parametrize("seconds", [0, -1])
def test_duration_bypass_still_rejects_non_positive(seconds):
    with pytest.raises(OutOfRangeError) as exc:
        Duration(seconds, bypass=True)
    assert exc.value.maximum is None


def test_duration_rejects_float():
    with pytest.raises(OutOfRangeError):
        Duration(1.5)


def test_duration_display():
    assert Duration(45).display == "45s"
    assert Duration(90).display == "1m 30s"
    assert Duration(840, bypass=True).display == "14m 0s"
