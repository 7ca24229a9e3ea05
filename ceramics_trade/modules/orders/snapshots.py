"""
orders/snapshots.py

Encode orders and invoices to the table-store rows and back.

Rows keep the camelCase payload the store already holds. Encoding always
writes freshly computed line figures and a totals snapshot; decoding reads
only the typed input fields, because every derived value is recomputed.
The cached totals are a cache: `order_totals_drift` / `invoice_totals_drift`
report where a stored snapshot no longer matches its own lines.
"""
from __future__ import annotations

import logging
from typing import Any, Optional

from ...constants import MONEY_PLACES
from ...utils.money import quantize
from ...utils.records import Record, make_record, record_data
from ...utils.validators import number_or_zero
from ..catalog import PackingTable
from .line_items import BoxLine, InvoiceLine, PricedLine, price_box_line
from .model import (
    CustomerInfo,
    Invoice,
    TileOrder,
    invoice_totals,
    order_totals,
    priced_items,
)
from .totals import Adjustments, OrderTotals

__all__ = [
    "order_to_record",
    "order_from_record",
    "invoice_to_record",
    "invoice_from_record",
    "order_totals_drift",
    "invoice_totals_drift",
    "snapshot_is_coherent",
]

_log = logging.getLogger(__name__)


def _text(v: Any) -> str:
    return "" if v is None else str(v)


# ---------- tile orders ----------

def _box_row(p: PricedLine) -> dict:
    src: BoxLine = p.source  # type: ignore[assignment]
    return {
        "id": src.id,
        "model": src.model,
        "length": src.length,
        "weight": src.width,
        "size": src.size,
        "qty": src.boxes,
        "rate": src.rate,
        "remarks": src.remarks,
        "sft": p.sft,
        "amount": p.net_amount,
    }


def _box_line(row: dict) -> BoxLine:
    return BoxLine(
        id=_text(row.get("id")),
        model=_text(row.get("model")),
        size=_text(row.get("size")),
        length=number_or_zero(row.get("length")),
        width=number_or_zero(row.get("weight", row.get("width"))),
        boxes=number_or_zero(row.get("qty")),
        rate=number_or_zero(row.get("rate")),
        remarks=_text(row.get("remarks")),
    )


def _order_totals_payload(t: OrderTotals) -> dict:
    return {"sft": t.sft, "amount": t.subtotal, "boxes": t.boxes}


def _box_rows(lines, packing: Optional[PackingTable]) -> list[dict]:
    return [_box_row(price_box_line(l, packing)) for l in lines]


def order_to_record(order: TileOrder, packing: Optional[PackingTable] = None) -> Record:
    # all three lists are stored as typed; only the active ones count towards totals
    totals = order_totals(order, packing)
    data = {
        "id": order.id,
        "date": order.date,
        "type": order.order_type,
        "customerInfo": {
            "name": order.customer.name,
            "address": order.customer.address,
            "phone": order.customer.phone,
        },
        "transitFlag": order.transit_flag,
        "items": _box_rows(order.items, packing),
        "firstLoadItems": _box_rows(order.first_load_items, packing),
        "secondLoadItems": _box_rows(order.second_load_items, packing),
        "totals": _order_totals_payload(totals),
    }
    return make_record(order.id, data)


def order_from_record(record: Record) -> TileOrder:
    data = record_data(record)
    info = data.get("customerInfo") or {}
    return TileOrder(
        id=_text(data.get("id") or record.get("id")),
        date=_text(data.get("date")),
        order_type=_text(data.get("type") or "warehouse"),
        customer=CustomerInfo(
            name=_text(info.get("name")),
            address=_text(info.get("address")),
            phone=_text(info.get("phone")),
        ),
        transit_flag=_text(data.get("transitFlag") or "wts"),
        items=tuple(_box_line(r) for r in data.get("items") or ()),
        first_load_items=tuple(_box_line(r) for r in data.get("firstLoadItems") or ()),
        second_load_items=tuple(_box_line(r) for r in data.get("secondLoadItems") or ()),
    )


# ---------- invoices ----------

def _invoice_row(p: PricedLine) -> dict:
    src: InvoiceLine = p.source  # type: ignore[assignment]
    return {
        "id": src.id,
        "desc": src.description,
        "model": src.model,
        "color": src.color,
        "len": src.length,
        "wid": src.width,
        "size": p.size_key,
        "brand": src.brand,
        "tpcs": src.requested_pieces,
        "sft": p.sft,
        "box": p.box_count,
        "pcs": p.loose_pieces,
        "rate": src.rate,
        "discountPercent": src.discount_percent,
        "discountAmt": p.discount_amount,
        "grossAmt": p.gross_amount,
        "netAmt": p.net_amount,
    }


def _invoice_line(row: dict) -> InvoiceLine:
    return InvoiceLine(
        id=_text(row.get("id")),
        model=_text(row.get("model")),
        description=_text(row.get("desc")),
        color=_text(row.get("color")),
        brand=_text(row.get("brand")),
        length=number_or_zero(row.get("len")),
        width=number_or_zero(row.get("wid")),
        requested_pieces=number_or_zero(row.get("tpcs")),
        rate=number_or_zero(row.get("rate")),
        discount_percent=number_or_zero(row.get("discountPercent")),
    )


def _invoice_totals_payload(t: OrderTotals) -> dict:
    return {
        "grossTotal": t.gross_total,
        "discountTotal": t.discount_total,
        "subtotal": t.subtotal,
        "less": t.less,
        "carrying": t.carrying,
        "unloading": t.unloading,
        "advance": t.advance,
        "vatAmount": t.vat_amount,
        "net": t.net,
        "rest": t.rest,
    }


def invoice_to_record(invoice: Invoice, packing: Optional[PackingTable] = None) -> Record:
    rows = [_invoice_row(p) for p in priced_items(invoice, packing)]
    totals = invoice_totals(invoice, packing)
    data = {
        "id": invoice.id,
        "clientName": invoice.client_name,
        "address": invoice.address,
        "siteAddress": invoice.site_address,
        "phone": invoice.phone,
        "remarks": invoice.remarks,
        "salesperson": invoice.salesperson,
        "salesphone": invoice.salesphone,
        "date": invoice.date,
        "time": invoice.time,
        "poNo": invoice.po_no,
        "items": rows,
        "vatPercent": invoice.adjustments.vat_percent,
        "totals": _invoice_totals_payload(totals),
    }
    return make_record(invoice.id, data)


def invoice_from_record(record: Record) -> Invoice:
    data = record_data(record)
    totals = data.get("totals") or {}
    return Invoice(
        id=_text(data.get("id") or record.get("id")),
        date=_text(data.get("date")),
        client_name=_text(data.get("clientName")),
        address=_text(data.get("address")),
        site_address=_text(data.get("siteAddress")),
        phone=_text(data.get("phone")),
        remarks=_text(data.get("remarks")),
        salesperson=_text(data.get("salesperson")),
        salesphone=_text(data.get("salesphone")),
        time=_text(data.get("time")),
        po_no=_text(data.get("poNo")),
        items=tuple(_invoice_line(r) for r in data.get("items") or ()),
        adjustments=Adjustments(
            less=number_or_zero(totals.get("less")),
            carrying=number_or_zero(totals.get("carrying")),
            unloading=number_or_zero(totals.get("unloading")),
            vat_percent=number_or_zero(data.get("vatPercent")),
            advance_paid=number_or_zero(totals.get("advance")),
        ),
    )


# ---------- cache coherence ----------

def _drift(cached: dict, fresh: dict) -> dict[str, tuple[Any, Any]]:
    """Keys whose cached value differs from the recomputed one at cent precision."""
    out: dict[str, tuple[Any, Any]] = {}
    for key, value in fresh.items():
        stored = cached.get(key)
        if quantize(number_or_zero(stored), MONEY_PLACES) != quantize(value, MONEY_PLACES):
            out[key] = (stored, value)
    return out


def order_totals_drift(record: Record, packing: Optional[PackingTable] = None) -> dict[str, tuple[Any, Any]]:
    data = record_data(record)
    fresh = _order_totals_payload(order_totals(order_from_record(record), packing))
    drift = _drift(data.get("totals") or {}, fresh)
    if drift:
        _log.info("Order %s totals snapshot is stale: %s", data.get("id"), drift)
    return drift


def invoice_totals_drift(record: Record, packing: Optional[PackingTable] = None) -> dict[str, tuple[Any, Any]]:
    data = record_data(record)
    fresh = _invoice_totals_payload(invoice_totals(invoice_from_record(record), packing))
    # vatAmount was not always cached; only compare it when present
    cached = data.get("totals") or {}
    if "vatAmount" not in cached:
        fresh.pop("vatAmount")
    drift = _drift(cached, fresh)
    if drift:
        _log.info("Invoice %s totals snapshot is stale: %s", data.get("id"), drift)
    return drift


def snapshot_is_coherent(record: Record, packing: Optional[PackingTable] = None) -> bool:
    """True when the cached totals equal the totals recomputed from the stored lines."""
    data = record_data(record)
    if "clientName" in data or "vatPercent" in data:
        return not invoice_totals_drift(record, packing)
    return not order_totals_drift(record, packing)
