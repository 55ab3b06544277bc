"""Tests for the Duration value type."""

from dataclasses import FrozenInstanceError
from datetime import timedelta

import pytest

from caldur import HOUR, MINUTE, Duration


def test_default_is_zero():
    """Test that a Duration with no fields is the zero duration."""
    assert Duration().is_zero()
    assert not Duration().has_time_part()


def test_any_field_makes_non_zero():
    """Test that every single field breaks is_zero."""
    for name in ("years", "months", "weeks", "days", "hours", "minutes", "seconds"):
        assert not Duration(**{name: 1}).is_zero()


def test_has_time_part_only_for_clock_fields():
    """Test that has_time_part ignores calendar fields."""
    assert not Duration(years=1, months=2, weeks=3, days=4).has_time_part()
    assert Duration(hours=1).has_time_part()
    assert Duration(minutes=1).has_time_part()
    assert Duration(seconds=1).has_time_part()


def test_structural_equality_and_hash():
    """Test that durations compare and hash by value."""
    a = Duration(years=1, days=2)
    b = Duration(years=1, days=2)

    assert a == b
    assert hash(a) == hash(b)
    assert a != Duration(years=1, days=3)
    assert len({a, b}) == 1


def test_is_immutable():
    """Test that fields cannot be reassigned."""
    d = Duration(days=1)
    with pytest.raises(FrozenInstanceError):
        d.days = 2  # type: ignore[misc]


def test_rejects_negative_values():
    """Test that negative fields are rejected."""
    with pytest.raises(ValueError, match="must be >= 0"):
        Duration(days=-1)


@pytest.mark.parametrize("value", [1.5, "1", True, None])
def test_rejects_non_int_values(value):
    """Test that only plain ints are accepted."""
    with pytest.raises(TypeError, match="must be an int"):
        Duration(hours=value)


def test_time_delta_covers_clock_fields_only():
    """Test that time_delta ignores calendar fields."""
    d = Duration(years=1, days=4, hours=5, minutes=6, seconds=7)

    assert d.time_delta() == timedelta(hours=5, minutes=6, seconds=7)
    assert d.time_delta().total_seconds() == 5 * HOUR + 6 * MINUTE + 7


def test_str_and_parse_classmethod():
    """Test the str/parse convenience wrappers."""
    d = Duration.parse("P1Y2M3W4DT5H6M7S")

    assert d == Duration(
        years=1, months=2, weeks=3, days=4, hours=5, minutes=6, seconds=7
    )
    assert str(d) == "P1Y2M3W4DT5H6M7S"
