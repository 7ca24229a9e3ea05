"""
utils/ids.py

Document id generators. Formats follow what the table store already holds:

  orders          ORD-19-Oct-26-K3F
  invoices        CT12345            (last five digits of the ms clock)
  finance entries ADV-1234 / DUE-1234
  SO entries      SO-R-7QX2
  truck refs      TRK-7QX2

Uniqueness is checked against `existing` ids when the caller passes them;
the engines treat ids as opaque strings.
"""
from __future__ import annotations

import random
import string
import time
from typing import Callable, Iterable, Optional

from .helpers import display_date

_ALPHABET = string.digits + string.ascii_uppercase
_MAX_ATTEMPTS = 50

Clock = Callable[[], float]


def _millis(clock: Clock) -> int:
    return int(clock() * 1000)


def _token(n: int, rng: random.Random) -> str:
    return "".join(rng.choice(_ALPHABET) for _ in range(n))


def _unique(make: Callable[[int], str], existing: Iterable[str]) -> str:
    taken = set(existing or ())
    for attempt in range(_MAX_ATTEMPTS):
        candidate = make(attempt)
        if candidate not in taken:
            return candidate
    raise RuntimeError("Could not generate a unique id; too many collisions.")


def order_id(order_date: str, *, rng: Optional[random.Random] = None,
             existing: Iterable[str] = ()) -> str:
    rng = rng or random.Random()
    prefix = f"ORD-{display_date(order_date)}-"
    return _unique(lambda _: prefix + _token(3, rng), existing)


def invoice_id(*, clock: Clock = time.time, existing: Iterable[str] = ()) -> str:
    base = _millis(clock)
    return _unique(lambda i: f"CT{str(base + i)[-5:]}", existing)


def finance_entry_id(prefix: str, *, clock: Clock = time.time,
                     existing: Iterable[str] = ()) -> str:
    """`prefix` is the ledger prefix, 'ADV' or 'DUE'."""
    base = _millis(clock)
    return _unique(lambda i: f"{prefix}-{str(base + i)[-4:]}", existing)


def so_id(*, rng: Optional[random.Random] = None, existing: Iterable[str] = ()) -> str:
    rng = rng or random.Random()
    return _unique(lambda _: "SO-R-" + _token(4, rng), existing)


def truck_ref(*, rng: Optional[random.Random] = None) -> str:
    rng = rng or random.Random()
    return "TRK-" + _token(4, rng)
