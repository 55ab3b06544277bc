"""Canonical text form of durations."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from caldur.duration import Duration

ZERO = "P0D"


def format_duration(d: Duration) -> str:
    """Return the canonical ISO 8601 form of ``d``.

    Zero-valued components are omitted and ``T`` only appears when there is
    a time part. The zero duration is written ``P0D`` rather than ``P``.
    """
    if d.is_zero():
        return ZERO

    parts = ["P"]
    for value, letter in (
        (d.years, "Y"),
        (d.months, "M"),
        (d.weeks, "W"),
        (d.days, "D"),
    ):
        if value:
            parts.append(f"{value}{letter}")

    if d.has_time_part():
        parts.append("T")
        for value, letter in ((d.hours, "H"), (d.minutes, "M"), (d.seconds, "S")):
            if value:
                parts.append(f"{value}{letter}")

    return "".join(parts)
