from __future__ import annotations
import logging
import math

from .errors import InvalidValueError, UnsupportedPrefixRangeError
from .prefixes import MAX_ORDER, MIN_ORDER, scale, symbol_of

__all__ = [
    "DEFAULT_PRECISION",
    "decimal_exponent",
    "prefix_exponent",
    "split",
    "compose",
    "encode",
]

logger = logging.getLogger(__name__)

DEFAULT_PRECISION = 2


def decimal_exponent(value: float) -> int:
    """
    Returns the largest integer e such that 1 <= |value / 10**e| < 10.

    Zero has exponent 0. Raises InvalidValueError for NaN and infinities.
    """
    if math.isnan(value) or math.isinf(value):
        raise InvalidValueError(value)
    if value == 0:
        return 0
    magnitude = abs(value)
    exponent = math.floor(math.log10(magnitude))
    # log10 may round across a decade boundary, e.g. just below 1000.
    # Far outside the prefix range 10**-exponent overflows, and the exact
    # decade does not matter there.
    if abs(exponent) < 300:
        mantissa = scale(magnitude, -exponent)
        if mantissa < 1.0:
            exponent -= 1
        elif mantissa >= 10.0:
            exponent += 1
    return exponent


def prefix_exponent(exponent: int) -> int:
    """Rounds `exponent` down (toward -inf) to a multiple of 3."""
    return 3 * (exponent // 3)


def split(value: float, *, precision: int = DEFAULT_PRECISION) -> tuple[float, int]:
    """
    Splits `value` into a mantissa and a power-of-ten order that has an SI
    prefix, such that value = mantissa * 10**order and 1 <= |mantissa| < 1000.

    Parameters
    ----------
    value: float
        Finite value to split.
    precision: int
        Number of decimals the mantissa will be printed with. A mantissa that
        would print as 1000 is moved to the next prefix instead.

    Returns
    -------
    tuple[float, int]
        mantissa:
            Coefficient printed in front of the prefix. Exactly 0.0 for a zero
            value of either sign.
        order:
            Exponent of the prefix, in [-12, 12].

    Raises
    ------
    InvalidValueError
        If `value` is NaN or infinite.
    UnsupportedPrefixRangeError
        If `value` would need a prefix smaller than pico or larger than tera.
    ValueError
        If `precision` is negative.
    """
    if precision < 0:
        raise ValueError("precision must be >= 0")
    exponent = decimal_exponent(value)
    if value == 0:
        return 0.0, 0

    order = prefix_exponent(exponent)
    if not MIN_ORDER <= order <= MAX_ORDER:
        raise UnsupportedPrefixRangeError(order)

    mantissa = scale(value, -order)
    if abs(round(mantissa, precision)) >= 1000.0 and order < MAX_ORDER:
        order += 3
        mantissa = scale(value, -order)
    return mantissa, order


def compose(mantissa: float, symbol: str, unit: str, precision: int) -> str:
    """Joins a mantissa, prefix symbol and unit label into the output text."""
    if precision < 0:
        raise ValueError("precision must be >= 0")
    number = f"{mantissa:.{precision}f}"
    if not symbol and not unit:
        return number
    return f"{number} {symbol}{unit}"


def encode(unit: str, value: float, *, precision: int = DEFAULT_PRECISION) -> str:
    """
    Formats `value` as a string with an SI prefix in front of `unit`.

    The output has the form '<mantissa> <prefix><unit>', with the mantissa
    printed with `precision` decimals (two by default), e.g.
    encode('Hz', 1500.0) gives '1.50 KHz' and encode('V', -0.0034) gives
    '-3.40 mV'. Without prefix it reads '<mantissa> <unit>'.

    Raises
    ------
    InvalidValueError
        If `value` is NaN or infinite.
    UnsupportedPrefixRangeError
        If the magnitude of `value` is outside the pico..tera range.
    """
    try:
        mantissa, order = split(value, precision=precision)
    except (InvalidValueError, UnsupportedPrefixRangeError) as err:
        logger.debug("Cannot encode %r %s: %s", value, unit, err)
        raise

    symbol = symbol_of(order)
    assert symbol is not None, f"no prefix for order {order}"

    return compose(mantissa, symbol, unit, precision)
