from .duration import Duration
from .parser import parse
from .formatter import format_duration
from .shift import shift
from .codec import DurationEncoder, duration_hook, from_json, to_json
from .errors import DurationError, GrammarMismatchError, NumericOverflowError
from .util import DAY, HOUR, MINUTE, SECOND, WEEK

__all__ = [
    "Duration",
    "parse",
    "format_duration",
    "shift",
    "to_json",
    "from_json",
    "DurationEncoder",
    "duration_hook",
    "DurationError",
    "GrammarMismatchError",
    "NumericOverflowError",
    "SECOND",
    "MINUTE",
    "HOUR",
    "DAY",
    "WEEK",
]
