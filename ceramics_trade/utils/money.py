"""
utils/money.py

Decimal helpers shared by the order and ledger engines.

Inputs arrive as float/int/str from forms and stored records; they are turned
into Decimal through str() so binary float noise never leaks into sums.
Rounding is ROUND_HALF_UP, i.e. half away from zero for negative values too.
"""
from __future__ import annotations

from decimal import Decimal, InvalidOperation, ROUND_HALF_UP
from typing import Any, Iterable

__all__ = ["D", "ZERO", "quantize", "round_float", "dsum", "as_count"]

ZERO = Decimal("0")


def D(x: Any) -> Decimal:
    """Best-effort Decimal conversion; None, blanks and junk become 0."""
    if x is None:
        return ZERO
    if isinstance(x, Decimal):
        return x
    try:
        d = Decimal(str(x).strip() or "0")
    except (InvalidOperation, ValueError, TypeError):
        return ZERO
    # NaN/Infinity from float('nan') etc. degrade like blank input
    return d if d.is_finite() else ZERO


def quantize(x: Any, places: int = 2) -> Decimal:
    """Round half away from zero to `places` decimals."""
    q = Decimal(1).scaleb(-places)
    return D(x).quantize(q, rounding=ROUND_HALF_UP)


def round_float(x: Any, places: int = 2) -> float:
    return float(quantize(x, places))


def dsum(values: Iterable[Any]) -> Decimal:
    return sum((D(v) for v in values), ZERO)


def as_count(x: Any) -> int | float:
    """Piece counts: int when whole (10), float when a fraction was typed (2.5)."""
    d = D(x)
    if d == d.to_integral_value():
        return int(d)
    return float(d)
