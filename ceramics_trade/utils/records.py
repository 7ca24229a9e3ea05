"""
utils/records.py

Helpers for the table-store row shape {"id": <key>, "data": {...}}.

The store upserts on "id"; these mirror that on an in-memory list so callers
can apply a write locally before (or instead of) sending it.
"""
from __future__ import annotations

from typing import Any, Iterable

Record = dict[str, Any]


def make_record(record_id: str, data: dict) -> Record:
    if not record_id:
        raise ValueError("Record id is required.")
    return {"id": record_id, "data": data}


def record_data(record: Record) -> dict:
    """Accept either a full row or the bare data payload."""
    if isinstance(record, dict) and "data" in record and isinstance(record["data"], dict):
        return record["data"]
    return record


def upsert_record(records: Iterable[Record], record: Record) -> list[Record]:
    """Replace the row with the same id, or append it. Returns a new list."""
    out: list[Record] = []
    replaced = False
    for r in records:
        if r.get("id") == record["id"]:
            out.append(record)
            replaced = True
        else:
            out.append(r)
    if not replaced:
        out.append(record)
    return out


def remove_record(records: Iterable[Record], record_id: str) -> list[Record]:
    return [r for r in records if r.get("id") != record_id]
