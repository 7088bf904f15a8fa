from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal
from typing import Union

Number = Union[int, float, Decimal]


def round_half_up(value: Number, ndigits: int = 0) -> Decimal:
    """Round half away from zero (builtin round() rounds half to even)."""
    exp = Decimal(1).scaleb(-ndigits)
    return Decimal(str(value)).quantize(exp, rounding=ROUND_HALF_UP)


def round_to_int(value: Number) -> int:
    return int(round_half_up(value))


def safe_percentage(numerator: Number, denominator: Number, *, ndigits: int = 2) -> Union[int, float]:
    """numerator / denominator * 100; 0 when the denominator is 0."""
    if not denominator:
        return 0
    pct = Decimal(str(numerator)) / Decimal(str(denominator)) * 100
    if ndigits == 0:
        return int(round_half_up(pct))
    return float(round_half_up(pct, ndigits))
