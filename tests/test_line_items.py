# tests/test_line_items.py
import pytest

from ceramics_trade.modules.orders.line_items import (
    BoxLine,
    InvoiceLine,
    compute_line,
    price_box_line,
    price_invoice_line,
)


def test_compute_line_discount():
    amt = compute_line(400, 50, 10)
    assert amt.gross_amount == pytest.approx(20000.0)
    assert amt.discount_amount == pytest.approx(2000.0)
    assert amt.net_amount == pytest.approx(18000.0)


def test_compute_line_rounds_half_up():
    amt = compute_line(0.125, 1)
    assert amt.gross_amount == pytest.approx(0.13)
    assert amt.net_amount == pytest.approx(0.13)


def test_compute_line_net_not_derived_from_rounded_parts():
    # gross 1.005 -> 1.01, discount 0.5025 -> 0.50, net 0.5025 -> 0.50
    amt = compute_line(1.005, 1, 50)
    assert amt.gross_amount == pytest.approx(1.01)
    assert amt.discount_amount == pytest.approx(0.50)
    assert amt.net_amount == pytest.approx(0.50)


def test_compute_line_no_rate_is_zero():
    amt = compute_line(120, 0, 5)
    assert (amt.gross_amount, amt.discount_amount, amt.net_amount) == (0.0, 0.0, 0.0)


def test_price_invoice_line(invoice_packing):
    p = price_invoice_line(InvoiceLine(length=24, width=24, requested_pieces=100, rate=50, discount_percent=10),
                           invoice_packing)
    assert p.size_key == "24X24"
    assert p.sft == pytest.approx(400.0)
    assert (p.box_count, p.loose_pieces, p.pieces) == (25, 0, 100)
    assert p.net_amount == pytest.approx(18000.0)


def test_price_invoice_line_prices_unrounded_area(invoice_packing):
    # 6.125 sft shown as 6.13, but money uses 6.125
    p = price_invoice_line(InvoiceLine(length=10.5, width=12, requested_pieces=7, rate=10), invoice_packing)
    assert p.sft == pytest.approx(6.13)
    assert p.gross_amount == pytest.approx(61.25)


def test_price_box_line(box_packing):
    p = price_box_line(BoxLine(model="PG-6060", size="60X60", length=60, width=60, boxes=10, rate=95), box_packing)
    assert p.box_count == 10
    assert p.loose_pieces == 0
    assert p.pieces == 40
    assert p.discount_amount == 0.0
    assert p.net_amount == pytest.approx(14725.04)


def test_price_invoice_line_fractional_pieces(invoice_packing):
    p = price_invoice_line(InvoiceLine(length=24, width=24, requested_pieces=10.5, rate=10), invoice_packing)
    assert p.pieces == pytest.approx(10.5)
    assert (p.box_count, p.loose_pieces) == (2, 2.5)
    assert p.gross_amount == pytest.approx(420.0)
