# tests/test_totals.py
import pytest

from ceramics_trade.modules.orders import (
    Adjustments,
    BoxLine,
    Invoice,
    InvoiceLine,
    TileOrder,
    active_lines,
    check_invoice,
    check_order,
    invoice_totals,
    order_title,
    order_totals,
    transit_text,
)
from ceramics_trade.modules.orders.line_items import price_invoice_line
from ceramics_trade.modules.orders.totals import aggregate


def _invoice(**adj) -> Invoice:
    return Invoice(
        id="CT12345",
        date="2026-10-19",
        client_name="Rahim Traders",
        items=(
            InvoiceLine(id="1", length=24, width=24, requested_pieces=100, rate=50, discount_percent=10),
            InvoiceLine(id="2", length=12, width=12, requested_pieces=10, rate=10),
        ),
        adjustments=Adjustments(**adj),
    )


def test_invoice_totals_with_adjustments(invoice_packing):
    t = invoice_totals(
        _invoice(less=100, carrying=200, unloading=50, vat_percent=5, advance_paid=5000),
        invoice_packing,
    )
    assert t.gross_total == pytest.approx(20100.0)
    assert t.discount_total == pytest.approx(2000.0)
    assert t.subtotal == pytest.approx(18100.0)
    assert t.vat_amount == pytest.approx(905.0)
    assert t.net == pytest.approx(19155.0)
    assert t.rest == pytest.approx(14155.0)
    assert t.sft == pytest.approx(410.0)
    assert (t.boxes, t.loose_pieces, t.pieces, t.line_count) == (25, 10, 110, 2)


def test_invoice_totals_without_adjustments(invoice_packing):
    t = invoice_totals(_invoice(), invoice_packing)
    assert t.net == pytest.approx(t.subtotal)
    assert t.rest == pytest.approx(t.net)
    assert t.vat_amount == 0.0


def test_rest_may_go_negative(invoice_packing):
    t = invoice_totals(_invoice(advance_paid=20000), invoice_packing)
    assert t.rest == pytest.approx(-1900.0)


def test_vat_rounded_to_cents(invoice_packing):
    lines = [price_invoice_line(InvoiceLine(length=12, width=12, requested_pieces=1, rate=33.33), invoice_packing)]
    t = aggregate(lines, Adjustments(vat_percent=7.5))
    # 33.33 * 7.5% = 2.49975
    assert t.vat_amount == pytest.approx(2.50)
    assert t.net == pytest.approx(35.83)


def test_aggregate_empty():
    t = aggregate([])
    assert t.subtotal == 0.0
    assert t.net == 0.0
    assert t.line_count == 0


def test_two_point_order_sums_both_loads(box_packing):
    first = (BoxLine(id="a", model="PG-6060", size="60X60", length=60, width=60, boxes=10, rate=95),)
    second = (BoxLine(id="b", model="HDT-2001", size="20X20", length=20, width=20, boxes=2, rate=0),)
    order = TileOrder(
        id="ORD-19-Oct-26-AAA",
        date="2026-10-19",
        order_type="twopoint",
        items=(BoxLine(id="ignored", size="60X60", length=60, width=60, boxes=99, rate=95),),
        first_load_items=first,
        second_load_items=second,
    )
    t = order_totals(order, box_packing)
    assert t.line_count == 2
    assert t.boxes == 12
    assert t.subtotal == pytest.approx(14725.04)
    assert set(t.group_subtotals) == {"first_load", "second_load"}
    assert t.group_subtotals["first_load"].net_amount == pytest.approx(14725.04)
    assert t.group_subtotals["second_load"].line_count == 1


def test_warehouse_order_uses_items_only(box_packing):
    order = TileOrder(
        id="ORD-19-Oct-26-BBB",
        date="2026-10-19",
        items=(BoxLine(size="60X60", length=60, width=60, boxes=10, rate=95),),
        first_load_items=(BoxLine(size="60X60", length=60, width=60, boxes=5, rate=95),),
    )
    t = order_totals(order, box_packing)
    assert t.boxes == 10
    assert t.group_subtotals == {}


def test_order_rejects_unknown_type():
    with pytest.raises(ValueError):
        TileOrder(id="x", date="2026-10-19", order_type="harbour")


def test_document_checks():
    assert check_order(TileOrder(id="x", date="2026-10-19")) == ["Add at least one item"]
    inv = Invoice(id="CT1", date="2026-10-19")
    assert check_invoice(inv) == ["Client Name is required", "Add at least one item"]
    assert check_invoice(_invoice()) == []


def test_totals_ignore_line_order(invoice_packing):
    inv = _invoice(less=10, vat_percent=7.5)
    flipped = Invoice(id=inv.id, date=inv.date, client_name=inv.client_name,
                      items=tuple(reversed(inv.items)), adjustments=inv.adjustments)
    assert invoice_totals(inv, invoice_packing) == invoice_totals(flipped, invoice_packing)


@pytest.mark.parametrize("field,delta", [("less", -1), ("carrying", 1), ("unloading", 1), ("advance_paid", 0)])
def test_each_adjustment_moves_net_or_rest(invoice_packing, field, delta):
    base = invoice_totals(_invoice(), invoice_packing)
    moved = invoice_totals(_invoice(**{field: 1}), invoice_packing)
    assert moved.net - base.net == pytest.approx(delta)
    if field == "advance_paid":
        assert base.rest - moved.rest == pytest.approx(1)


def test_order_title_and_transit():
    site = TileOrder(id="x", date="2026-10-19", order_type="site", transit_flag="stw")
    two = TileOrder(id="y", date="2026-10-19", order_type="twopoint", transit_flag="stw")
    assert order_title(site) == "Site Delivery Order"
    assert transit_text(site) == ""
    assert order_title(two) == "2-Point Tiles Order"
    assert transit_text(two) == "Transit Direction: Site to Warehouse"


def test_active_lines():
    a, b, c = BoxLine(id="a"), BoxLine(id="b"), BoxLine(id="c")
    two = TileOrder(id="y", date="2026-10-19", order_type="twopoint", items=(a,), first_load_items=(b,),
                    second_load_items=(c,))
    assert active_lines(two) == (b, c)
    assert active_lines(TileOrder(id="z", date="2026-10-19", items=(a,), first_load_items=(b,))) == (a,)
