"""Exceptions raised while reading ISO 8601 duration strings.

Formatting and shifting never fail, so every error here comes from parsing.
All of them subclass ``ValueError`` so callers validating user input can
catch the builtin.
"""


class DurationError(ValueError):
    """Base class for duration parsing errors."""


class GrammarMismatchError(DurationError):
    """The input is not a valid ISO 8601 duration string."""

    def __init__(self, text: str):
        self.text: str = text
        super().__init__(
            f"Could not parse duration string: {text!r}\n"
            f"Expected the form P[nY][nM][nW][nD][T[nH][nM][nS]] with "
            f"components in that order.\n"
            f"Examples: 'P1Y', 'P3W', 'PT36H', 'P1Y2M3W4DT5H6M7S'"
        )


class NumericOverflowError(DurationError):
    """A captured digit run could not be converted to an integer."""

    def __init__(self, text: str, component: str):
        self.text: str = text
        self.component: str = component
        shown = text if len(text) <= 32 else text[:32] + "..."
        super().__init__(
            f"Duration component too large to convert "
            f"({len(component)} digits) in {shown!r}"
        )
