from dataclasses import dataclass, fields
from datetime import datetime, timedelta

from caldur.formatter import format_duration
from caldur.shift import shift
from caldur.util import HOUR, MINUTE, SECOND


@dataclass(frozen=True, kw_only=True)
class Duration:
    """An ISO 8601 duration such as ``P1Y2M3W4DT5H6M7S``.

    Calendar fields (years, months, weeks, days) are applied with calendar
    arithmetic, clock fields (hours, minutes, seconds) as elapsed time.
    See :func:`caldur.shift.shift`.
    """

    years: int = 0
    months: int = 0
    weeks: int = 0
    days: int = 0
    # Time component
    hours: int = 0
    minutes: int = 0
    seconds: int = 0

    def __post_init__(self) -> None:
        for f in fields(self):
            value = getattr(self, f.name)
            if not isinstance(value, int) or isinstance(value, bool):
                raise TypeError(
                    f"Duration {f.name} must be an int, "
                    f"got {type(value).__name__}: {value!r}"
                )
            if value < 0:
                raise ValueError(
                    f"Duration {f.name} must be >= 0, got {value}\n"
                    f"Negative durations are not supported."
                )

    @classmethod
    def parse(cls, text: str) -> "Duration":
        """Parse an ISO 8601 duration string. See :func:`caldur.parser.parse`."""
        from caldur.parser import parse

        return parse(text)

    def is_zero(self) -> bool:
        """True if this is the zero duration, ``P0D``."""
        return (
            self.years == 0
            and self.months == 0
            and self.weeks == 0
            and self.days == 0
            and self.hours == 0
            and self.minutes == 0
            and self.seconds == 0
        )

    def has_time_part(self) -> bool:
        """True if any of hours, minutes or seconds is non-zero."""
        return self.hours > 0 or self.minutes > 0 or self.seconds > 0

    def time_delta(self) -> timedelta:
        """Return the clock part of the duration as elapsed time."""
        return timedelta(
            seconds=self.hours * HOUR + self.minutes * MINUTE + self.seconds * SECOND
        )

    def shift(self, t: datetime) -> datetime:
        """Return ``t`` moved forward by this duration."""
        return shift(self, t)

    def __str__(self) -> str:
        return format_duration(self)
