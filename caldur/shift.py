"""Applying durations to datetimes.

A shift happens in two phases:

1. Calendar phase: years, months and ``weeks * 7 + days`` days are added to
   the local date, keeping the wall-clock time. Adding one day across a DST
   transition therefore keeps the local hour.
2. Time phase: hours, minutes and seconds are added as elapsed time. Adding
   24 hours across a DST transition moves the local hour by the offset
   change.

Python's ``aware + timedelta`` is wall-clock arithmetic, so the time phase
goes through UTC explicitly.
"""

from __future__ import annotations

from datetime import datetime, timedelta, timezone
from typing import TYPE_CHECKING

from dateutil.relativedelta import relativedelta

if TYPE_CHECKING:
    from caldur.duration import Duration


def shift(d: Duration, t: datetime) -> datetime:
    """
    Return ``t`` moved forward by duration ``d``.

    Day-of-month overflow rolls into the following month instead of being
    clamped: Aug 31 + P1M is Oct 1, and Feb 29 + P1Y is Mar 1. Shifting by
    months is only predictable for start dates before the 29th.

    Works with naive and aware datetimes. Aware results keep the tzinfo of
    ``t``; wall times that land in a DST gap are moved forward to a real
    instant.

    Args:
        d: Duration to apply
        t: Start datetime

    Returns:
        The shifted datetime

    Raises:
        OverflowError: From ``datetime`` if the result is out of its range
            (ValueError from relativedelta for out-of-range years)

    Example:
        >>> from datetime import datetime
        >>> from caldur import Duration, shift
        >>> shift(Duration(months=1), datetime(2018, 1, 31))
        datetime.datetime(2018, 3, 3, 0, 0)
    """
    if d.years or d.months or d.weeks or d.days:
        t = _add_date(t, d.years, d.months, d.weeks * 7 + d.days)

    if d.has_time_part():
        t = _add_elapsed(t, d.time_delta())

    return t


def _add_date(t: datetime, years: int, months: int, days: int) -> datetime:
    """Calendar-aware addition with day-of-month overflow normalization."""
    # Anchor on the 1st so relativedelta never clamps to a shorter month,
    # then walk forward the original day offset plus the requested days.
    first = t + relativedelta(day=1, years=years, months=months)
    result = first + timedelta(days=t.day - 1 + days)

    if result.tzinfo is not None and result.utcoffset() is not None:
        result = result.astimezone(timezone.utc).astimezone(result.tzinfo)
    return result


def _add_elapsed(t: datetime, delta: timedelta) -> datetime:
    """Absolute addition of elapsed time, independent of DST."""
    if t.tzinfo is None or t.utcoffset() is None:
        return t + delta
    return (t.astimezone(timezone.utc) + delta).astimezone(t.tzinfo)
