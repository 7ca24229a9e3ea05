"""
orders/line_items.py

Money for one order/invoice line:

    gross    = rate * sft
    discount = gross * discount_percent / 100
    net      = gross - discount

Each figure is rounded to 2 places from the raw values, so net is NOT
computed from the rounded gross/discount. The pricing helpers feed the
unrounded area (exact_sft) in; the displayed sft is rounded separately.
Negative inputs are not clamped.
"""
from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import Optional

from ...constants import MONEY_PLACES
from ...utils.money import D, as_count, round_float
from ..catalog import PackingTable
from .units import convert, convert_boxes

__all__ = [
    "LineAmounts",
    "PricedLine",
    "InvoiceLine",
    "BoxLine",
    "compute_line",
    "price_invoice_line",
    "price_box_line",
]

_HUNDRED = Decimal(100)


@dataclass(frozen=True)
class LineAmounts:
    gross_amount: float
    discount_amount: float
    net_amount: float


def compute_line(sft, rate, discount_percent=0) -> LineAmounts:
    gross = D(rate) * D(sft)
    discount = gross * D(discount_percent) / _HUNDRED
    net = gross - discount
    return LineAmounts(
        gross_amount=round_float(gross, MONEY_PLACES),
        discount_amount=round_float(discount, MONEY_PLACES),
        net_amount=round_float(net, MONEY_PLACES),
    )


@dataclass(frozen=True)
class InvoiceLine:
    """Invoice row as typed: inch dimensions, total pieces."""
    id: str = ""
    model: str = ""
    description: str = ""
    color: str = ""
    brand: str = ""
    length: float = 0.0
    width: float = 0.0
    requested_pieces: float = 0
    rate: float = 0.0
    discount_percent: float = 0.0


@dataclass(frozen=True)
class BoxLine:
    """Tile-order row as typed: centimetre dimensions, box count."""
    id: str = ""
    model: str = ""
    size: str = ""
    length: float = 0.0
    width: float = 0.0
    boxes: float = 0
    rate: float = 0.0
    remarks: str = ""


@dataclass(frozen=True)
class PricedLine:
    """
    A line with every derived figure filled in. Never edited; re-price the
    source line instead.
    """
    source: InvoiceLine | BoxLine
    size_key: str
    sft: float
    box_count: int
    loose_pieces: int | float
    pieces: int | float
    gross_amount: float
    discount_amount: float
    net_amount: float


def price_invoice_line(line: InvoiceLine, packing: Optional[PackingTable] = None) -> PricedLine:
    qty = convert(line.length, line.width, line.requested_pieces, packing=packing)
    money = compute_line(qty.exact_sft, line.rate, line.discount_percent)
    return PricedLine(
        source=line,
        size_key=qty.size_key,
        sft=qty.sft,
        box_count=qty.box_count,
        loose_pieces=qty.loose_pieces,
        pieces=as_count(line.requested_pieces),
        gross_amount=money.gross_amount,
        discount_amount=money.discount_amount,
        net_amount=money.net_amount,
    )


def price_box_line(line: BoxLine, packing: Optional[PackingTable] = None) -> PricedLine:
    """Box orders carry no discount; amount = sft * rate."""
    qty = convert_boxes(line.length, line.width, line.boxes, line.size or None, line.model, packing=packing)
    money = compute_line(qty.exact_sft, line.rate)
    return PricedLine(
        source=line,
        size_key=qty.size_key,
        sft=qty.sft,
        box_count=int(D(line.boxes)),
        loose_pieces=0,
        pieces=qty.pieces,
        gross_amount=money.gross_amount,
        discount_amount=money.discount_amount,
        net_amount=money.net_amount,
    )
