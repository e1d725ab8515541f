from __future__ import annotations
import logging
import math
import re

from .errors import (
    MalformedInputError,
    NumericParseError,
    SuffixMismatchError,
    UnitError,
    UnrecognisedPrefixError,
)
from .prefixes import order_of, scale

__all__ = ["UNIT_PATTERN", "decode"]

logger = logging.getLogger(__name__)

# '<numerator> <prefix><unit>', e.g. '10.2 dBmV' or '-3.4mV'
UNIT_PATTERN = re.compile(r"(-?[0-9.]+) ?([a-zA-Z]+)")


def _as_text(text: str | bytes | bytearray, unit: str) -> str:
    if isinstance(text, (bytes, bytearray)):
        try:
            return text.decode("ascii")
        except UnicodeDecodeError as err:
            raise MalformedInputError(repr(bytes(text)), unit) from err
    return text


def decode(unit: str, text: str | bytes | bytearray) -> float:
    """
    Parses a string with an SI prefixed unit back into a float.

    The text must read '<number> <prefix><unit>', where the space is
    optional and <prefix> is one of the table's symbols or empty, e.g.
    decode('Hz', '100.2 KHz') gives 100200.0.

    Parameters
    ----------
    unit: str
        Expected unit label. Only checked as a suffix of the letters after the
        number.
    text: str | bytes | bytearray
        Text to parse. Bytes are read as ASCII.

    Raises
    ------
    MalformedInputError
        If `text` does not have the shape described above.
    SuffixMismatchError
        If the letters after the number do not end with `unit`.
    UnrecognisedPrefixError
        If the letters before `unit` are not an SI prefix.
    NumericParseError
        If the number is not a valid decimal numeral, e.g. '1.2.3', or is
        too large to represent as a float once scaled by its prefix.
    """
    try:
        return _decode(unit, _as_text(text, unit))
    except UnitError as err:
        logger.debug("Rejected %r: %s", text, err)
        raise


def _decode(unit: str, text: str) -> float:
    match = UNIT_PATTERN.fullmatch(text)
    if match is None:
        raise MalformedInputError(text, unit)
    numerator, token = match.groups()

    if not token.endswith(unit):
        raise SuffixMismatchError(token, unit)

    prefix = token[:len(token) - len(unit)]
    order = order_of(prefix)
    if order is None:
        raise UnrecognisedPrefixError(prefix)

    try:
        base = float(numerator)
    except ValueError as err:
        raise NumericParseError(numerator) from err

    value = scale(base, order)
    # overlong numerals and large prefixes overflow to inf
    if not math.isfinite(value):
        raise NumericParseError(numerator)
    return value
