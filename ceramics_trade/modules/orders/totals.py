"""
orders/totals.py

Roll priced lines up into document totals:

    subtotal = sum(net_amount)
    vat      = subtotal * vat_percent / 100          (2 places)
    net      = subtotal - less + carrying + unloading + vat
    rest     = net - advance_paid

Always a full pass over every line; line counts are tens, not thousands.
Grouped input (e.g. first/second load) adds per-group subtotals but the
grand totals are summed across all groups unconditionally.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal
from typing import Iterable, Mapping, Optional, Union

from ...constants import MONEY_PLACES, SFT_PLACES
from ...utils.money import D, as_count, dsum, quantize

__all__ = ["Adjustments", "GroupSubtotal", "OrderTotals", "aggregate"]

_HUNDRED = Decimal(100)


@dataclass(frozen=True)
class Adjustments:
    less: float = 0.0
    carrying: float = 0.0
    unloading: float = 0.0
    vat_percent: float = 0.0
    advance_paid: float = 0.0


@dataclass(frozen=True)
class GroupSubtotal:
    sft: float
    gross_amount: float
    discount_amount: float
    net_amount: float
    boxes: int
    line_count: int


@dataclass(frozen=True)
class OrderTotals:
    sft: float
    gross_total: float
    discount_total: float
    subtotal: float
    vat_percent: float
    vat_amount: float
    less: float
    carrying: float
    unloading: float
    advance: float
    net: float
    rest: float
    boxes: int
    loose_pieces: int | float
    pieces: int | float
    line_count: int
    group_subtotals: Mapping[str, GroupSubtotal] = field(default_factory=dict)


def _subtotal(lines: list) -> GroupSubtotal:
    return GroupSubtotal(
        sft=float(quantize(dsum(l.sft for l in lines), SFT_PLACES)),
        gross_amount=float(quantize(dsum(l.gross_amount for l in lines), MONEY_PLACES)),
        discount_amount=float(quantize(dsum(l.discount_amount for l in lines), MONEY_PLACES)),
        net_amount=float(quantize(dsum(l.net_amount for l in lines), MONEY_PLACES)),
        boxes=sum(int(l.box_count) for l in lines),
        line_count=len(lines),
    )


LinesInput = Union[Iterable, Mapping[str, Iterable]]


def aggregate(lines: LinesInput, adjustments: Optional[Adjustments] = None) -> OrderTotals:
    """
    `lines` holds priced lines (anything with sft, gross_amount,
    discount_amount, net_amount, box_count, loose_pieces, pieces), either flat
    or as {group name: lines}.
    """
    adj = adjustments or Adjustments()

    groups: dict[str, list] = {}
    if isinstance(lines, Mapping):
        groups = {str(name): list(group) for name, group in lines.items()}
        flat = [l for group in groups.values() for l in group]
    else:
        flat = list(lines)

    # Line values are already 2-place figures, so these sums are exact
    sft = dsum(l.sft for l in flat)
    gross = dsum(l.gross_amount for l in flat)
    discount = dsum(l.discount_amount for l in flat)
    subtotal = dsum(l.net_amount for l in flat)

    vat = quantize(subtotal * D(adj.vat_percent) / _HUNDRED, MONEY_PLACES)
    net = subtotal - D(adj.less) + D(adj.carrying) + D(adj.unloading) + vat
    rest = net - D(adj.advance_paid)

    return OrderTotals(
        sft=float(quantize(sft, SFT_PLACES)),
        gross_total=float(quantize(gross, MONEY_PLACES)),
        discount_total=float(quantize(discount, MONEY_PLACES)),
        subtotal=float(quantize(subtotal, MONEY_PLACES)),
        vat_percent=float(D(adj.vat_percent)),
        vat_amount=float(vat),
        less=float(D(adj.less)),
        carrying=float(D(adj.carrying)),
        unloading=float(D(adj.unloading)),
        advance=float(D(adj.advance_paid)),
        net=float(net),
        rest=float(rest),
        boxes=sum(int(l.box_count) for l in flat),
        loose_pieces=as_count(dsum(l.loose_pieces for l in flat)),
        pieces=as_count(dsum(l.pieces for l in flat)),
        line_count=len(flat),
        group_subtotals={name: _subtotal(group) for name, group in groups.items()},
    )
