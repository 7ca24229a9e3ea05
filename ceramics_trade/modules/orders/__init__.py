# modules/orders/__init__.py
from .line_items import (
    BoxLine,
    InvoiceLine,
    LineAmounts,
    PricedLine,
    compute_line,
    price_box_line,
    price_invoice_line,
)
from .model import (
    CustomerInfo,
    Invoice,
    TileOrder,
    active_lines,
    check_invoice,
    check_order,
    invoice_totals,
    order_title,
    order_totals,
    transit_text,
)
from .totals import Adjustments, GroupSubtotal, OrderTotals, aggregate
from .units import BoxQuantity, TileQuantity, convert, convert_boxes, size_key

__all__ = [
    "Adjustments",
    "BoxLine",
    "BoxQuantity",
    "CustomerInfo",
    "GroupSubtotal",
    "Invoice",
    "InvoiceLine",
    "LineAmounts",
    "OrderTotals",
    "PricedLine",
    "TileOrder",
    "TileQuantity",
    "active_lines",
    "aggregate",
    "check_invoice",
    "check_order",
    "compute_line",
    "convert",
    "convert_boxes",
    "invoice_totals",
    "order_title",
    "order_totals",
    "price_box_line",
    "price_invoice_line",
    "size_key",
    "transit_text",
]
