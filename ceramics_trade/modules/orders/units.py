"""
orders/units.py

Tile dimensions + quantity -> area (sft) and box/loose-piece breakdown.

Two geometries:
  - invoice lines: inches, counted in pieces, 144 sq-in per sft
  - warehouse/box orders: centimetres, counted in boxes, 929.03 sq-cm per sft

Pure functions. Missing dimensions or packing data give zeroed results,
never an exception. Negative counts are the caller's problem.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from decimal import Decimal
from typing import Optional

from ...constants import EMPTY_SIZE_KEY, SFT_PLACES, SQ_CM_PER_SFT, SQ_INCHES_PER_SFT
from ...utils.money import D, as_count, round_float
from ..catalog import PackingTable, default_tables, normalize_size

__all__ = ["TileQuantity", "BoxQuantity", "size_key", "convert", "convert_boxes"]

_log = logging.getLogger(__name__)

_SQ_IN = Decimal(SQ_INCHES_PER_SFT)
_SQ_CM = Decimal(SQ_CM_PER_SFT)


@dataclass(frozen=True)
class TileQuantity:
    size_key: str
    sft: float
    box_count: int
    loose_pieces: int | float
    pieces_per_box: int
    exact_sft: Decimal = field(default=Decimal(0), repr=False)


@dataclass(frozen=True)
class BoxQuantity:
    size_key: str
    pieces_per_box: int
    pieces: int | float
    sft: float
    exact_sft: Decimal = field(default=Decimal(0), repr=False)


def _dim_text(x: Decimal) -> str:
    # 24.0 -> "24", 10.50 -> "10.5"
    if x == x.to_integral_value():
        return str(int(x))
    return format(x.normalize(), "f")


def size_key(length, width) -> str:
    """'24X24' style key, or EMPTY_SIZE_KEY when either dimension is missing/zero."""
    L, W = D(length), D(width)
    if not L or not W:
        return EMPTY_SIZE_KEY
    return f"{_dim_text(L)}X{_dim_text(W)}"


def _split(qty: Decimal, per_box: int) -> tuple[int, int | float]:
    # a typed fraction (10.5 pieces) stays in the loose count
    if per_box <= 0:
        return 0, as_count(qty)
    boxes = int(qty // per_box)
    return boxes, as_count(qty - boxes * per_box)


def convert(
    length,
    width,
    requested_pieces,
    pieces_per_box: Optional[int] = None,
    *,
    packing: Optional[PackingTable] = None,
) -> TileQuantity:
    """
    Inch geometry for invoice lines.

    sft = (length * width / 144) * pieces, rounded half away from zero.
    An explicit `pieces_per_box` wins over the packing table lookup.
    """
    L, W = D(length), D(width)
    qty = D(requested_pieces)
    key = size_key(L, W)

    if pieces_per_box is None:
        table = packing if packing is not None else default_tables().invoice_packing
        per_box = table.pieces_per_box(key)
    else:
        per_box = int(pieces_per_box or 0)

    sft = (L * W / _SQ_IN) * qty
    boxes, loose = _split(qty, per_box)
    return TileQuantity(
        size_key=key,
        sft=round_float(sft, SFT_PLACES),
        box_count=boxes,
        loose_pieces=loose,
        pieces_per_box=per_box,
        exact_sft=sft,
    )


def convert_boxes(
    length,
    width,
    boxes,
    size: Optional[str] = None,
    model: Optional[str] = None,
    *,
    packing: Optional[PackingTable] = None,
) -> BoxQuantity:
    """
    Centimetre geometry for warehouse/box orders.

    sft = boxes * pieces_per_box * (length * width / 929.03). The packing
    constant comes from the (model, size) override, else the size default.
    `size` defaults to the key built from the dimensions.
    """
    L, W = D(length), D(width)
    box_qty = D(boxes)
    key = normalize_size(size) if size else size_key(L, W)
    table = packing if packing is not None else default_tables().box_packing
    per_box = table.pieces_per_box(key, model)

    if not (L and W and box_qty and per_box > 0):
        _log.debug("Box line %r incomplete (L=%s W=%s boxes=%s pcs/box=%s); zero sft.", key, L, W, box_qty, per_box)
        return BoxQuantity(size_key=key, pieces_per_box=per_box, pieces=0, sft=0.0)

    area = L * W / _SQ_CM
    sft = box_qty * per_box * area
    pieces = box_qty * per_box
    return BoxQuantity(
        size_key=key,
        pieces_per_box=per_box,
        pieces=as_count(pieces),
        sft=round_float(sft, SFT_PLACES),
        exact_sft=sft,
    )
