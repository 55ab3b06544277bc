"""Parsing of ISO 8601 duration strings.

The accepted grammar is the fixed-order subset::

    P[nY][nM][nW][nD][T[nH][nM][nS]]

where every ``n`` is a run of ASCII digits. Components may not be reordered,
signed or fractional.
"""

import re

from caldur.duration import Duration
from caldur.errors import GrammarMismatchError, NumericOverflowError

_PATTERN = re.compile(
    r"P((?P<year>\d+)Y)?((?P<month>\d+)M)?((?P<week>\d+)W)?((?P<day>\d+)D)?"
    r"(T((?P<hour>\d+)H)?((?P<minute>\d+)M)?((?P<second>\d+)S)?)?",
    re.ASCII,
)

# Mapping from capture group names to Duration fields
_FIELD_MAP = {
    "year": "years",
    "month": "months",
    "week": "weeks",
    "day": "days",
    "hour": "hours",
    "minute": "minutes",
    "second": "seconds",
}


def parse(text: str) -> Duration:
    """
    Parse an ISO 8601 duration string into a :class:`Duration`.

    Components absent from the input are 0. ``PT`` is accepted and equals
    the zero duration.

    Args:
        text: Duration string, e.g. ``"P1Y2M3W4DT5H6M7S"``

    Returns:
        The parsed duration

    Raises:
        TypeError: If text is not a string
        GrammarMismatchError: If text does not match the grammar
        NumericOverflowError: If a component has too many digits to convert

    Example:
        >>> from caldur import parse
        >>> parse("P10Y5M8DT5H10M6S")
        Duration(years=10, months=5, weeks=0, days=8, hours=5, minutes=10, seconds=6)
    """
    if not isinstance(text, str):
        raise TypeError(
            f"Duration string must be str, got {type(text).__name__}: {text!r}"
        )

    match = _PATTERN.fullmatch(text)
    if match is None:
        raise GrammarMismatchError(text)

    values: dict[str, int] = {}
    for name, part in match.groupdict().items():
        if part is None:
            continue

        try:
            value = int(part)
        except ValueError as e:
            # Only reachable past the interpreter's int string-conversion limit
            raise NumericOverflowError(text, part) from e

        field = _FIELD_MAP.get(name)
        if field is None:
            raise RuntimeError(f"unknown duration field {name!r}")
        values[field] = value

    return Duration(**values)
