"""JSON encoding of durations.

A duration is stored in JSON as a single string holding its canonical form,
e.g. ``"P1Y2M3W4DT5H6M7S"``. Decoding runs the string through the parser,
so parse errors propagate unchanged.
"""

import json
from collections.abc import Callable, Iterable
from typing import Any

from typing_extensions import override

from caldur.duration import Duration
from caldur.formatter import format_duration
from caldur.parser import parse


def to_json(d: Duration) -> str:
    """Return ``d`` as a JSON string literal."""
    return json.dumps(format_duration(d))


def from_json(data: str | bytes) -> Duration:
    """
    Decode a JSON string literal holding a duration.

    Args:
        data: JSON document whose top-level value is a string

    Returns:
        The parsed duration

    Raises:
        json.JSONDecodeError: If data is not valid JSON
        TypeError: If the decoded value is not a string
        GrammarMismatchError: If the string is not a valid duration
        NumericOverflowError: If a component has too many digits to convert
    """
    value = json.loads(data)
    if not isinstance(value, str):
        raise TypeError(
            f"Cannot decode JSON {type(value).__name__} into a Duration, "
            f"expected a string like \"P1D\""
        )
    return parse(value)


class DurationEncoder(json.JSONEncoder):
    """JSON encoder that writes :class:`Duration` values as strings.

    Example:
        >>> json.dumps({"ttl": Duration(days=1)}, cls=DurationEncoder)
        '{"ttl": "P1D"}'
    """

    @override
    def default(self, o: Any) -> Any:
        if isinstance(o, Duration):
            return format_duration(o)
        return super().default(o)


def duration_hook(
    keys: Iterable[str],
) -> Callable[[dict[str, Any]], dict[str, Any]]:
    """
    Build a ``json.loads`` object hook that decodes the named fields.

    Every JSON object with a string value under one of ``keys`` gets that
    value replaced by a parsed :class:`Duration`. Other values are left as-is.

    Example:
        >>> hook = duration_hook(["ttl"])
        >>> json.loads('{"ttl": "PT30M"}', object_hook=hook)
        {'ttl': Duration(years=0, months=0, weeks=0, days=0, hours=0, minutes=30, seconds=0)}
    """
    names = frozenset(keys)

    def hook(obj: dict[str, Any]) -> dict[str, Any]:
        for key in names.intersection(obj):
            if isinstance(obj[key], str):
                obj[key] = parse(obj[key])
        return obj

    return hook
