"""
utils/amount_words.py

Spell an amount the way it is printed on invoices: South-Asian grouping
(Thousand, Lac = 1,00,000, Crore = 1,00,00,000), e.g.

    1250000 -> "Twelve Lac Fifty Thousand Taka Only"

Only the integer part is spelled; paisa are dropped (floor).
"""
from __future__ import annotations

from decimal import ROUND_FLOOR

from ..constants import CURRENCY_NAME
from .money import D

__all__ = ["to_words", "spell_integer"]

_ONES = (
    "", "One", "Two", "Three", "Four", "Five", "Six", "Seven", "Eight", "Nine", "Ten",
    "Eleven", "Twelve", "Thirteen", "Fourteen", "Fifteen", "Sixteen", "Seventeen",
    "Eighteen", "Nineteen",
)
_TENS = ("", "", "Twenty", "Thirty", "Forty", "Fifty", "Sixty", "Seventy", "Eighty", "Ninety")

THOUSAND = 1_000
LAC = 100_000
CRORE = 10_000_000


def _join(head: str, rest: int) -> str:
    return head + (" " + spell_integer(rest) if rest else "")


def spell_integer(n: int) -> str:
    """Words for a non-negative integer; 0 gives an empty string."""
    if n < 20:
        return _ONES[n]
    if n < 100:
        return _TENS[n // 10] + (" " + _ONES[n % 10] if n % 10 else "")
    if n < THOUSAND:
        rem = n % 100
        return _ONES[n // 100] + " Hundred" + (" and " + spell_integer(rem) if rem else "")
    if n < LAC:
        return _join(spell_integer(n // THOUSAND) + " Thousand", n % THOUSAND)
    if n < CRORE:
        return _join(spell_integer(n // LAC) + " Lac", n % LAC)
    return _join(spell_integer(n // CRORE) + " Crore", n % CRORE)


def to_words(amount, currency: str = CURRENCY_NAME) -> str:
    """
    Amount in words for legal/document display.

    0 -> "Zero". A positive amount below one unit reads "Zero Taka Only";
    a negative amount is prefixed with "Minus".
    """
    value = D(amount)
    if value == 0:
        return "Zero"
    sign = "Minus " if value < 0 else ""
    whole = int(abs(value).to_integral_value(rounding=ROUND_FLOOR))
    words = spell_integer(whole) or "Zero"
    return f"{sign}{words} {currency} Only"
