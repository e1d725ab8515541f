from __future__ import annotations

from .prefixes import PREFIXES

__all__ = [
    "UnitError",
    "InvalidValueError",
    "UnsupportedPrefixRangeError",
    "MalformedInputError",
    "SuffixMismatchError",
    "UnrecognisedPrefixError",
    "NumericParseError",
]


def _options() -> str:
    return ", ".join(repr(symbol) for symbol in PREFIXES)


class UnitError(ValueError):
    """Base class of all errors raised while encoding or decoding units."""


class InvalidValueError(UnitError):
    """The value to encode is NaN or infinite."""

    def __init__(self, value: float) -> None:
        self.value = value
        super().__init__(f"Cannot encode non-finite value {value!r}.")


class UnsupportedPrefixRangeError(UnitError):
    """The value needs a prefix outside of pico..tera."""

    def __init__(self, exponent: int) -> None:
        self.exponent = exponent
        super().__init__(
            f"Unsupported prefix for exponent 10^{exponent} "
            f"(options: {_options()})"
        )


class MalformedInputError(UnitError):
    """The text does not look like '<number> <prefix><unit>'."""

    def __init__(self, text: str, unit: str) -> None:
        self.text = text
        self.unit = unit
        super().__init__(
            f"Unit must be of the form 'Value Prefix{unit}', "
            f"ie. '100.2 K{unit}' (got {text!r})"
        )


class SuffixMismatchError(UnitError):
    """The letters after the number do not end with the expected unit."""

    def __init__(self, token: str, unit: str) -> None:
        self.token = token
        self.unit = unit
        super().__init__(
            f"Unable to parse unit: '{token}' expected suffix: '{unit}'"
        )


class UnrecognisedPrefixError(UnitError):
    """The letters in front of the unit are not a known SI prefix."""

    def __init__(self, prefix: str) -> None:
        self.prefix = prefix
        super().__init__(
            f"Unrecognised SI prefix: '{prefix}' (options: {_options()})"
        )


class NumericParseError(UnitError):
    """The number in front of the unit is not a valid decimal numeral."""

    def __init__(self, numerator: str) -> None:
        self.numerator = numerator
        super().__init__(f"Invalid number: '{numerator}'")
