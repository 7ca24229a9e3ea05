"""
ledger/snapshots.py

Finance entries <-> table-store rows. Stored rows use the camelCase payload
and the stored kind names (ADVANCE_ENTRY, ADVANCE_ADJ, DUE_ENTRY,
DUE_PAYMENT).
"""
from __future__ import annotations

from ...utils.records import Record, make_record, record_data
from ...utils.validators import try_parse_float
from .model import WIRE_NAMES, FinanceEntry, ensure_valid_kind


def entry_to_record(entry: FinanceEntry) -> Record:
    data = {
        "id": entry.id,
        "partyName": entry.party_name,
        "phone": entry.phone,
        "type": WIRE_NAMES[ensure_valid_kind(entry.kind)],
        "amount": entry.amount,
        "date": entry.date,
        "remarks": entry.remarks,
    }
    return make_record(entry.id, data)


def entry_from_record(record: Record) -> FinanceEntry:
    """
    Raises ValueError when the row's type is not a known ledger kind or its
    amount is not a positive number.
    """
    data = record_data(record)
    raw_amount = data.get("amount")
    ok, amount = try_parse_float(raw_amount)
    return FinanceEntry(
        id=str(data.get("id") or record.get("id") or ""),
        party_name=str(data.get("partyName") or ""),
        kind=str(data.get("type") or ""),
        amount=amount if ok else raw_amount,
        date=str(data.get("date") or ""),
        phone=str(data.get("phone") or ""),
        remarks=str(data.get("remarks") or ""),
    )


def entries_from_records(records) -> list[FinanceEntry]:
    return [entry_from_record(r) for r in records]
