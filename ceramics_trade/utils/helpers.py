# utils/helpers.py
import logging
from datetime import date
from typing import Union, Optional

NumberLike = Union[float, int, str]

_log = logging.getLogger(__name__)

_MONTH_NAMES = ("January", "February", "March", "April", "May", "June", "July",
                "August", "September", "October", "November", "December")
_MONTH_ABBR = tuple(n[:3] for n in _MONTH_NAMES)


def today_str() -> str:
    """Return today's date as ISO string (YYYY-MM-DD)."""
    return date.today().isoformat()


def fmt_money(
    v: NumberLike,
    places: int = 2,
    *,
    strict: bool = False,
    sentinel: Optional[str] = None,
) -> str:
    """
    Format a number as money with thousands separators and a fixed number of decimals.

    On parse failure returns str(v), or `sentinel` when given; strict=True
    raises ValueError instead.
    """
    try:
        x = float(v)
    except Exception as e:
        _log.debug("fmt_money: failed to parse %r as float: %s", v, e)
        if strict:
            raise ValueError(f"Could not parse {v!r} as a number.") from e
        return str(sentinel) if sentinel is not None else str(v)
    return f"{x:,.{places}f}"


def _split_iso(iso: str) -> tuple[int, int, int]:
    y, m, d = str(iso).strip()[:10].split("-")
    return int(y), int(m), int(d)


def display_date(iso: str) -> str:
    """
    '2026-10-19' -> '19-Oct-26', the date style printed on orders and used in order ids.
    Raises ValueError on a malformed date.
    """
    y, m, d = _split_iso(iso)
    if not 1 <= m <= 12:
        raise ValueError(f"Invalid month in date {iso!r}.")
    return f"{d:02d}-{_MONTH_ABBR[m - 1]}-{y % 100:02d}"


def month_key(iso: str) -> str:
    """'2026-10-19' -> '2026-10'."""
    return str(iso).strip()[:7]


def month_label(key: str) -> str:
    """'2026-10' -> 'October 2026'. Locale independent."""
    y, m = key.split("-")[:2]
    return f"{_MONTH_NAMES[int(m) - 1]} {int(y)}"
