# modules/orders/model.py
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from ...utils.validators import invoice_problems, order_problems
from ..catalog import PackingTable
from .line_items import BoxLine, InvoiceLine, PricedLine, price_box_line, price_invoice_line
from .totals import Adjustments, OrderTotals, aggregate

ORDER_TYPES: tuple[str, ...] = ("warehouse", "twopoint", "site")
TRANSIT_FLAGS: tuple[str, ...] = ("wts", "stw")  # warehouse->site, site->warehouse

ORDER_TITLES = {
    "warehouse": "Warehouse Tiles Order",
    "twopoint": "2-Point Tiles Order",
    "site": "Site Delivery Order",
}

TRANSIT_LABELS = {
    "wts": "Warehouse to Site",
    "stw": "Site to Warehouse",
}

FIRST_LOAD = "first_load"
SECOND_LOAD = "second_load"


@dataclass(frozen=True)
class CustomerInfo:
    name: str = ""
    address: str = ""
    phone: str = ""


@dataclass(frozen=True)
class TileOrder:
    id: str
    date: str
    order_type: str = "warehouse"
    customer: CustomerInfo = field(default_factory=CustomerInfo)
    transit_flag: str = "wts"
    items: tuple[BoxLine, ...] = ()
    first_load_items: tuple[BoxLine, ...] = ()
    second_load_items: tuple[BoxLine, ...] = ()

    def __post_init__(self):
        if self.order_type not in ORDER_TYPES:
            raise ValueError(f"order_type must be one of: {', '.join(ORDER_TYPES)}")
        if self.transit_flag not in TRANSIT_FLAGS:
            raise ValueError(f"transit_flag must be one of: {', '.join(TRANSIT_FLAGS)}")


@dataclass(frozen=True)
class Invoice:
    id: str
    date: str
    client_name: str = ""
    address: str = ""
    site_address: str = ""
    phone: str = ""
    remarks: str = ""
    salesperson: str = ""
    salesphone: str = ""
    time: str = ""
    po_no: str = ""
    items: tuple[InvoiceLine, ...] = ()
    adjustments: Adjustments = field(default_factory=Adjustments)


# ---------- tile orders ----------

def is_two_point(order: TileOrder) -> bool:
    return order.order_type == "twopoint"


def order_title(order: TileOrder) -> str:
    return ORDER_TITLES[order.order_type]


def transit_text(order: TileOrder) -> str:
    """'Transit Direction: Warehouse to Site' for two-point orders, else ''."""
    if not is_two_point(order):
        return ""
    return f"Transit Direction: {TRANSIT_LABELS[order.transit_flag]}"


def active_lines(order: TileOrder) -> tuple[BoxLine, ...]:
    """Two-point orders are made of both loads; the rest of `items`."""
    if is_two_point(order):
        return order.first_load_items + order.second_load_items
    return order.items


def priced_groups(order: TileOrder, packing: Optional[PackingTable] = None) -> dict[str, list[PricedLine]]:
    if is_two_point(order):
        return {
            FIRST_LOAD: [price_box_line(l, packing) for l in order.first_load_items],
            SECOND_LOAD: [price_box_line(l, packing) for l in order.second_load_items],
        }
    return {"items": [price_box_line(l, packing) for l in order.items]}


def order_totals(order: TileOrder, packing: Optional[PackingTable] = None) -> OrderTotals:
    groups = priced_groups(order, packing)
    if is_two_point(order):
        return aggregate(groups)
    return aggregate(groups["items"])


def check_order(order: TileOrder) -> list[str]:
    return order_problems(len(active_lines(order)))


# ---------- invoices ----------

def priced_items(invoice: Invoice, packing: Optional[PackingTable] = None) -> list[PricedLine]:
    return [price_invoice_line(l, packing) for l in invoice.items]


def invoice_totals(invoice: Invoice, packing: Optional[PackingTable] = None) -> OrderTotals:
    return aggregate(priced_items(invoice, packing), invoice.adjustments)


def check_invoice(invoice: Invoice) -> list[str]:
    return invoice_problems(invoice.client_name, len(invoice.items))
