# tests/test_units.py
from decimal import Decimal

import pytest

from ceramics_trade.modules.orders.units import convert, convert_boxes, size_key


def test_size_key_formats_dimensions():
    assert size_key(24, 24) == "24X24"
    assert size_key(10.5, 12) == "10.5X12"
    assert size_key("24.0", "48") == "24X48"


def test_size_key_missing_dimension():
    assert size_key(0, 24) == "X"
    assert size_key(None, 12) == "X"


def test_convert_area_and_boxes(invoice_packing):
    q = convert(24, 24, 100, packing=invoice_packing)
    assert q.size_key == "24X24"
    assert q.sft == pytest.approx(400.0)
    assert q.pieces_per_box == 4
    assert (q.box_count, q.loose_pieces) == (25, 0)


def test_convert_splits_loose_pieces(invoice_packing):
    q = convert(24, 24, 10, packing=invoice_packing)
    assert (q.box_count, q.loose_pieces) == (2, 2)
    assert q.sft == pytest.approx(40.0)


def test_convert_explicit_pieces_per_box_wins(invoice_packing):
    q = convert(24, 24, 10, pieces_per_box=3, packing=invoice_packing)
    assert (q.box_count, q.loose_pieces) == (3, 1)


def test_convert_unknown_size_is_all_loose(invoice_packing):
    q = convert(7, 7, 13, packing=invoice_packing)
    assert q.pieces_per_box == 0
    assert (q.box_count, q.loose_pieces) == (0, 13)


def test_convert_keeps_unrounded_area(invoice_packing):
    # 10.5 x 12 in = 0.875 sft per piece
    q = convert(10.5, 12, 7, packing=invoice_packing)
    assert q.sft == pytest.approx(6.13)
    assert q.exact_sft == Decimal("6.125")


def test_convert_missing_dimensions_gives_zero_area(invoice_packing):
    q = convert(0, 24, 50, packing=invoice_packing)
    assert q.size_key == "X"
    assert q.sft == 0.0
    assert q.loose_pieces == 50


def test_convert_boxes_uses_size_default(box_packing):
    q = convert_boxes(60, 60, 10, "60X60", "PG-6060", packing=box_packing)
    assert q.pieces_per_box == 4
    assert q.pieces == 40
    assert q.sft == pytest.approx(155.0)


def test_convert_boxes_series_override(box_packing):
    hdt = convert_boxes(20, 20, 2, "20X20", "HDT-2001", packing=box_packing)
    glz = convert_boxes(20, 20, 2, "20X20", "GLZ-2002", packing=box_packing)
    assert hdt.pieces_per_box == 15
    assert glz.pieces_per_box == 25
    assert hdt.pieces == 30
    assert glz.pieces == 50


def test_convert_boxes_size_defaults_to_dimensions(box_packing):
    q = convert_boxes(30, 30, 1, packing=box_packing)
    assert q.size_key == "30X30"
    assert q.pieces_per_box == 11


@pytest.mark.parametrize("length,width,boxes", [(0, 60, 3), (60, 60, 0), (60, 0, 1)])
def test_convert_boxes_incomplete_row_is_zero(box_packing, length, width, boxes):
    q = convert_boxes(length, width, boxes, "60X60", packing=box_packing)
    assert q.sft == 0.0
    assert q.pieces == 0


def test_convert_boxes_unknown_size_is_zero(box_packing):
    q = convert_boxes(33, 33, 5, packing=box_packing)
    assert q.pieces_per_box == 0
    assert q.sft == 0.0


def test_convert_is_idempotent(invoice_packing):
    assert convert(12, 24, 37, packing=invoice_packing) == convert(12, 24, 37, packing=invoice_packing)


def test_convert_keeps_fractional_pieces_loose(invoice_packing):
    q = convert(24, 24, 10.5, packing=invoice_packing)
    assert q.sft == pytest.approx(42.0)
    assert q.box_count == 2
    assert q.loose_pieces == pytest.approx(2.5)
    assert q.box_count * q.pieces_per_box + q.loose_pieces == pytest.approx(10.5)


def test_convert_whole_pieces_stay_int(invoice_packing):
    q = convert(24, 24, "10", packing=invoice_packing)
    assert q.loose_pieces == 2
    assert isinstance(q.loose_pieces, int)
