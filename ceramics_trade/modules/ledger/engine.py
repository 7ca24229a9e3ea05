"""
ledger/engine.py

Replay advance/due transactions into per-party balances and check new
entries against them.

    advance_balance = sum(ADVANCE_RECEIPT) - sum(ADVANCE_ADJUSTMENT)
    due_balance     = sum(DUE_CREATED)     - sum(DUE_PAYMENT)

Balances are always a full replay of the list handed in; each entry only
adds to one of four counters, so entry order never changes the result.
An over-withdrawal is returned as an InsufficientBalance value, not raised.
Reading, validating and writing atomically against the store is the
caller's job.
"""
from __future__ import annotations

import logging
import time
from dataclasses import dataclass, field
from decimal import Decimal
from typing import Iterable, Mapping, Optional

from ...constants import CURRENCY_SYMBOL, MONEY_PLACES
from ...utils import ids
from ...utils.helpers import fmt_money, today_str
from ...utils.money import D, ZERO, quantize
from ...utils.validators import finance_entry_problems
from .model import (
    ADVANCE_ADJUSTMENT,
    ADVANCE_LEDGER,
    ADVANCE_RECEIPT,
    CREATION_KINDS,
    DUE_CREATED,
    DUE_PAYMENT,
    FinanceEntry,
    ensure_valid_kind,
    id_prefix,
    kind_label,
    ledger_of,
)

__all__ = [
    "PartyBalance",
    "InsufficientBalance",
    "InvalidEntry",
    "EntryOutcome",
    "balances_as_of",
    "validate",
    "eligible_parties",
    "is_eligible",
    "record_entry",
    "remove_entry",
    "filter_entries",
]

_log = logging.getLogger(__name__)


@dataclass(frozen=True)
class PartyBalance:
    party: str
    phone: str = ""
    advance_in: float = 0.0
    advance_out: float = 0.0
    due_in: float = 0.0
    due_out: float = 0.0
    last_date: str = ""

    @property
    def advance_balance(self) -> float:
        return float(D(self.advance_in) - D(self.advance_out))

    @property
    def due_balance(self) -> float:
        return float(D(self.due_in) - D(self.due_out))


@dataclass(frozen=True)
class InsufficientBalance:
    party: str
    kind: str
    requested: float
    max_allowed: float

    @property
    def message(self) -> str:
        what = "Adjustment exceeds balance" if self.kind == ADVANCE_ADJUSTMENT else "Payment exceeds due balance"
        return f"{what}. Max: {CURRENCY_SYMBOL}{fmt_money(self.max_allowed)}"


@dataclass(frozen=True)
class InvalidEntry:
    problems: tuple[str, ...]

    @property
    def message(self) -> str:
        return "; ".join(self.problems)


@dataclass(frozen=True)
class EntryOutcome:
    entry: Optional[FinanceEntry] = None
    rejection: Optional[InsufficientBalance | InvalidEntry] = None

    @property
    def ok(self) -> bool:
        return self.entry is not None


# ---------- fold ----------

_COUNTER = {
    ADVANCE_RECEIPT: "advance_in",
    ADVANCE_ADJUSTMENT: "advance_out",
    DUE_CREATED: "due_in",
    DUE_PAYMENT: "due_out",
}


@dataclass
class _Acc:
    counters: dict[str, Decimal] = field(default_factory=lambda: {c: ZERO for c in _COUNTER.values()})
    last_date: str = ""
    phone_key: tuple[str, str] = ("", "")
    phone: str = ""


def balances_as_of(entries: Iterable[FinanceEntry]) -> dict[str, PartyBalance]:
    """Party name -> balance, sorted by party name."""
    accs: dict[str, _Acc] = {}
    for e in entries:
        acc = accs.setdefault(e.party_name, _Acc())
        counter = _COUNTER[ensure_valid_kind(e.kind)]
        acc.counters[counter] += D(e.amount)
        if e.date > acc.last_date:
            acc.last_date = e.date
        # contact phone: the one on the latest (date, id) entry that has one
        if e.phone and (e.date, e.id) >= acc.phone_key:
            acc.phone_key = (e.date, e.id)
            acc.phone = e.phone

    out: dict[str, PartyBalance] = {}
    for party in sorted(accs):
        acc = accs[party]
        out[party] = PartyBalance(
            party=party,
            phone=acc.phone,
            last_date=acc.last_date,
            **{name: float(value) for name, value in acc.counters.items()},
        )
    return out


# ---------- checks ----------

def validate(proposed: FinanceEntry, balances: Mapping[str, PartyBalance]) -> Optional[InsufficientBalance]:
    """
    None if `proposed` may be recorded against `balances` (computed before it
    is added), else the rejection with the largest amount that would pass.
    """
    kind = ensure_valid_kind(proposed.kind)
    bal = balances.get(proposed.party_name) or PartyBalance(party=proposed.party_name)
    if kind == ADVANCE_ADJUSTMENT:
        available = bal.advance_balance
    elif kind == DUE_PAYMENT:
        available = bal.due_balance
    else:
        return None

    if D(proposed.amount) > D(available):
        rejection = InsufficientBalance(
            party=proposed.party_name,
            kind=kind,
            requested=float(D(proposed.amount)),
            max_allowed=float(quantize(available, MONEY_PLACES)),
        )
        _log.info("Rejected %s for %r: %s", kind, proposed.party_name, rejection.message)
        return rejection
    return None


def eligible_parties(kind: str, balances: Mapping[str, PartyBalance]) -> list[str]:
    """
    Parties an entry of `kind` may be booked against. Adjustments need a
    positive advance, payments a positive due. Creation kinds are
    unrestricted: every known party is listed and new names are accepted too
    (see is_eligible).
    """
    kind = ensure_valid_kind(kind)
    if kind == ADVANCE_ADJUSTMENT:
        return [p for p, b in balances.items() if b.advance_balance > 0]
    if kind == DUE_PAYMENT:
        return [p for p, b in balances.items() if b.due_balance > 0]
    return list(balances)


def is_eligible(kind: str, party: str, balances: Mapping[str, PartyBalance]) -> bool:
    if ensure_valid_kind(kind) in CREATION_KINDS:
        return True
    return party in eligible_parties(kind, balances)


# ---------- entry lifecycle ----------

def record_entry(
    entries: Iterable[FinanceEntry],
    *,
    party_name: str,
    kind: str,
    amount,
    date: Optional[str] = None,
    phone: str = "",
    remarks: str = "",
    clock=time.time,
) -> EntryOutcome:
    """
    Build the next entry for the ledger `entries` (the full authoritative
    history). Nothing is mutated; on success the caller appends and persists
    `outcome.entry`.
    """
    history = list(entries)
    problems = finance_entry_problems(party_name, amount)
    if problems:
        return EntryOutcome(rejection=InvalidEntry(tuple(problems)))

    kind = ensure_valid_kind(kind)
    party = str(party_name).strip()
    draft = FinanceEntry(
        id="",
        party_name=party,
        kind=kind,
        amount=float(D(amount)),
        date=date or today_str(),
        phone=str(phone or "").strip(),
        remarks=str(remarks or ""),
    )
    rejection = validate(draft, balances_as_of(history))
    if rejection is not None:
        return EntryOutcome(rejection=rejection)

    entry_id = ids.finance_entry_id(id_prefix(kind), clock=clock, existing=(e.id for e in history))
    entry = FinanceEntry(
        id=entry_id,
        party_name=draft.party_name,
        kind=draft.kind,
        amount=draft.amount,
        date=draft.date,
        phone=draft.phone,
        remarks=draft.remarks,
    )
    _log.debug("Recorded %s %s for %r: %s", entry.id, kind_label(kind), party, entry.amount)
    return EntryOutcome(entry=entry)


def remove_entry(entries: Iterable[FinanceEntry], entry_id: str) -> list[FinanceEntry]:
    """The ledger without `entry_id`; balances are replayed from the result."""
    return [e for e in entries if e.id != entry_id]


def filter_entries(
    entries: Iterable[FinanceEntry],
    ledger: Optional[str] = ADVANCE_LEDGER,
    query: str = "",
) -> list[FinanceEntry]:
    """Entries of one ledger (or all when None) whose party name or id contains `query`."""
    q = str(query or "").strip().lower()
    out = []
    for e in entries:
        if ledger is not None and ledger_of(e.kind) != ledger:
            continue
        if q and q not in e.party_name.lower() and q not in e.id.lower():
            continue
        out.append(e)
    return out
