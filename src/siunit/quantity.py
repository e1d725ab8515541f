from __future__ import annotations
from dataclasses import dataclass

from .decoding import decode
from .encoding import encode

__all__ = ["Quantity"]


@dataclass(frozen=True)
class Quantity:
    """
    A float together with the unit label it is expressed in.

    str() gives the SI prefixed text of the value, e.g.
    str(Quantity(1500.0, 'Hz')) == '1.50 KHz'. A format spec of the form
    '.N' prints the mantissa with N decimals instead of two.

    Attributes
    ----------
    value: float
        Value in the base unit (no prefix applied).
    unit: str
        Unit label, e.g. 'Hz' or 'V'.
    """
    value: float
    unit: str

    @classmethod
    def parse(cls, unit: str, text: str | bytes) -> Quantity:
        """Creates a Quantity in `unit` from text such as '100.2 KHz'."""
        return cls(decode(unit, text), unit)

    def __float__(self) -> float:
        return float(self.value)

    def __str__(self) -> str:
        return encode(self.unit, self.value)

    def __format__(self, format_spec: str) -> str:
        if not format_spec:
            return str(self)
        if not format_spec.startswith(".") or not format_spec[1:].isdigit():
            raise ValueError(f"Invalid format specifier '{format_spec}' for Quantity.")
        return encode(self.unit, self.value, precision=int(format_spec[1:]))

