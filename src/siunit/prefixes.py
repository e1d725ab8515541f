from __future__ import annotations
from dataclasses import dataclass
from types import MappingProxyType

__all__ = [
    "PrefixEntry",
    "PREFIX_TABLE",
    "PREFIXES",
    "ORDERS",
    "MIN_ORDER",
    "MAX_ORDER",
    "order_of",
    "symbol_of",
    "scale",
]


@dataclass(frozen=True)
class PrefixEntry:
    """
    One SI prefix and the power of ten it stands for.

    Attributes
    ----------
    symbol: str
        Prefix symbol as written in front of the unit label, e.g. 'K'. The
        empty string means "no prefix".
    order: int
        Exponent of the power of ten, always a multiple of 3.
    """
    symbol: str
    order: int

    def __str__(self) -> str:
        return f"{self.symbol or '-'}: 10^{self.order}"


PREFIX_TABLE: tuple[PrefixEntry, ...] = (
    PrefixEntry("p", -12),
    PrefixEntry("n", -9),
    PrefixEntry("u", -6),
    PrefixEntry("m", -3),
    PrefixEntry("", 0),
    PrefixEntry("K", 3),
    PrefixEntry("M", 6),
    PrefixEntry("G", 9),
    PrefixEntry("T", 12),
)

PREFIXES: tuple[str, ...] = tuple(entry.symbol for entry in PREFIX_TABLE)
ORDERS: tuple[int, ...] = tuple(entry.order for entry in PREFIX_TABLE)

MIN_ORDER = ORDERS[0]
MAX_ORDER = ORDERS[-1]

_order_by_symbol = MappingProxyType({e.symbol: e.order for e in PREFIX_TABLE})
_symbol_by_order = MappingProxyType({e.order: e.symbol for e in PREFIX_TABLE})


def order_of(symbol: str) -> int | None:
    """
    Returns the power-of-ten order of prefix `symbol`, or None if `symbol`
    is not one of the table's prefixes. The empty string has order 0.
    """
    return _order_by_symbol.get(symbol)


def symbol_of(order: int) -> str | None:
    """
    Returns the prefix symbol for power-of-ten `order`, or None if there is
    no prefix for it (e.g. 4, or 15).
    """
    return _symbol_by_order.get(order)


def scale(value: float, order: int) -> float:
    """
    Returns value * 10**order.

    Negative orders divide by the (exactly representable) positive power
    instead of multiplying by an inexact fraction, so that scale(3.4, -3)
    gives the same float as 3.4 / 1000.
    """
    if order >= 0:
        return value * 10.0 ** order
    return value / 10.0 ** -order
