from __future__ import annotations
import math

import numpy as np
from numpy.typing import ArrayLike

from .decoding import decode
from .encoding import DEFAULT_PRECISION, compose, encode, split
from .errors import InvalidValueError
from .prefixes import scale, symbol_of

__all__ = ["encode_array", "decode_array"]


def _shared_order(values: np.ndarray, precision: int) -> int:
    finite = values[np.isfinite(values)]
    if finite.size == 0:
        return 0
    _, order = split(float(np.max(np.abs(finite))), precision=precision)
    return order


def encode_array(
    unit: str,
    values: ArrayLike,
    *,
    precision: int = DEFAULT_PRECISION,
    shared_prefix: bool = False
) -> np.ndarray:
    """
    Formats every element of `values` with an SI prefixed `unit`.

    Parameters
    ----------
    unit: str
        Unit label appended to every element.
    values: ArrayLike
        Real values; anything numpy.asarray() turns into a float array.
    precision: int
        Number of decimals of each mantissa.
    shared_prefix: bool
        If True, all elements are written with the prefix of the element with
        the largest magnitude, e.g. a column of currents all in mA. Otherwise
        each element gets its own prefix.

    Returns
    -------
    numpy.ndarray
        Array of str (object dtype) with the same shape as `values`.

    Raises
    ------
    InvalidValueError
        If an element is NaN or infinite.
    UnsupportedPrefixRangeError
        If an element (or, with `shared_prefix`, the largest element) is out
        of the pico..tera range.
    """
    arr = np.asarray(values, dtype=float)
    out = np.empty(arr.shape, dtype=object)
    if not shared_prefix:
        for idx, value in np.ndenumerate(arr):
            out[idx] = encode(unit, float(value), precision=precision)
        return out

    order = _shared_order(arr, precision)
    symbol = symbol_of(order)
    for idx, value in np.ndenumerate(arr):
        value = float(value)
        if not math.isfinite(value):
            raise InvalidValueError(value)
        mantissa = scale(value, -order)
        if round(mantissa, precision) == 0:
            # no '-0.00'
            mantissa = 0.0
        out[idx] = compose(mantissa, symbol, unit, precision)
    return out


def decode_array(unit: str, texts: ArrayLike) -> np.ndarray:
    """
    Parses every element of `texts` with decode().

    Returns a float array with the same shape as `texts`.
    """
    arr = np.asarray(texts, dtype=object)
    out = np.empty(arr.shape, dtype=float)
    for idx, text in np.ndenumerate(arr):
        out[idx] = decode(unit, text)
    return out
