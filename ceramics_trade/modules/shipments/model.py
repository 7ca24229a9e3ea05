# modules/shipments/model.py
"""
Factory sales-order (SO) pipeline: an SO is opened against a saved tile
order, gets a truck assigned, then is marked unloaded.

    SO_READY -> TRUCK_ASSIGNED -> UNLOADED

Entries are immutable; each step returns the updated copy for the caller to
upsert. Bad input raises ValueError.
"""
from __future__ import annotations

import logging
import random
from dataclasses import dataclass, replace
from typing import Iterable, Optional

from ...utils import ids
from ...utils.helpers import today_str
from ...utils.records import Record, make_record, record_data
from ...utils.validators import non_empty

_log = logging.getLogger(__name__)

SO_READY = "SO_READY"
TRUCK_ASSIGNED = "TRUCK_ASSIGNED"
UNLOADED = "UNLOADED"
SO_STATUSES: tuple[str, ...] = (SO_READY, TRUCK_ASSIGNED, UNLOADED)


@dataclass(frozen=True)
class SOEntry:
    id: str
    order_ref: str
    date: str
    status: str = SO_READY
    pdf_name: str = ""
    truck_no: str = ""
    truck_ref: str = ""
    unload_pdf_name: str = ""
    unload_remarks: str = ""
    is_unloaded: bool = False

    def __post_init__(self):
        if self.status not in SO_STATUSES:
            raise ValueError(f"status must be one of: {', '.join(SO_STATUSES)}")


def open_so(
    order_ref: str,
    date: Optional[str],
    pdf_name: str,
    *,
    existing: Iterable[str] = (),
    rng: Optional[random.Random] = None,
) -> SOEntry:
    if not non_empty(order_ref) or not non_empty(pdf_name):
        raise ValueError("Please select an Order and upload Factory SO PDF")
    so = SOEntry(
        id=ids.so_id(rng=rng, existing=existing),
        order_ref=order_ref.strip(),
        date=date or today_str(),
        pdf_name=pdf_name.strip(),
    )
    _log.info("Opened %s for order %s", so.id, so.order_ref)
    return so


def assign_truck(so: SOEntry, truck_no: str, *, rng: Optional[random.Random] = None) -> SOEntry:
    """Re-assigning replaces the truck and issues a new truck ref."""
    if not non_empty(truck_no):
        raise ValueError("Truck number is required.")
    if so.status == UNLOADED:
        raise ValueError(f"{so.id} is already unloaded.")
    return replace(so, truck_no=truck_no.strip(), truck_ref=ids.truck_ref(rng=rng), status=TRUCK_ASSIGNED)


def record_unload(so: SOEntry, unloaded: bool = True, remarks: str = "", pdf_name: str = "") -> SOEntry:
    """
    Store unload details. `unloaded=False` keeps remarks/document but leaves
    the SO at TRUCK_ASSIGNED.
    """
    if not so.truck_no:
        raise ValueError(f"{so.id} has no truck assigned.")
    return replace(
        so,
        is_unloaded=bool(unloaded),
        status=UNLOADED if unloaded else TRUCK_ASSIGNED,
        unload_remarks=remarks or "",
        unload_pdf_name=pdf_name or so.unload_pdf_name,
    )


def available_orders(orders: Iterable, so_entries: Iterable[SOEntry]) -> list:
    """
    Orders (objects with an `id`, or plain id strings) not yet referenced by
    any SO, in input order.
    """
    taken = {so.order_ref for so in so_entries}
    return [o for o in orders if getattr(o, "id", o) not in taken]


def filter_so_entries(so_entries: Iterable[SOEntry], query: str = "") -> list[SOEntry]:
    """Match `query` against order ref, SO id or truck number (case-insensitive)."""
    q = str(query or "").strip().lower()
    if not q:
        return list(so_entries)
    return [
        so for so in so_entries
        if q in so.order_ref.lower() or q in so.id.lower() or q in so.truck_no.lower()
    ]


# ---------- rows ----------

def so_to_record(so: SOEntry) -> Record:
    data = {
        "id": so.id,
        "orderRef": so.order_ref,
        "date": so.date,
        "status": so.status,
        "pdfName": so.pdf_name,
        "truckNo": so.truck_no,
        "truckRef": so.truck_ref,
        "unloadPdfName": so.unload_pdf_name,
        "unloadRemarks": so.unload_remarks,
        "isUnloaded": so.is_unloaded,
    }
    return make_record(so.id, data)


def so_from_record(record: Record) -> SOEntry:
    data = record_data(record)
    return SOEntry(
        id=str(data.get("id") or record.get("id") or ""),
        order_ref=str(data.get("orderRef") or ""),
        date=str(data.get("date") or ""),
        status=str(data.get("status") or SO_READY),
        pdf_name=str(data.get("pdfName") or ""),
        truck_no=str(data.get("truckNo") or ""),
        truck_ref=str(data.get("truckRef") or ""),
        unload_pdf_name=str(data.get("unloadPdfName") or ""),
        unload_remarks=str(data.get("unloadRemarks") or ""),
        is_unloaded=bool(data.get("isUnloaded")),
    )
