# ceramics_trade/modules/reporting/summaries.py
"""
Read-only roll-ups for the reports dashboard.

Order and invoice figures are recomputed from the documents' lines (never
read back from cached totals). Finance roll-ups sum the raw ledger entries.
Monthly buckets are keyed 'YYYY-MM' and returned newest first.
"""
from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import Iterable, Mapping, Optional

from ...utils.helpers import month_key, month_label
from ...utils.money import D, ZERO
from ..catalog import PackingTable
from ..ledger import (
    ADVANCE_ADJUSTMENT,
    ADVANCE_LEDGER,
    ADVANCE_RECEIPT,
    DUE_CREATED,
    DUE_PAYMENT,
    FinanceEntry,
    PartyBalance,
    ledger_of,
)
from ..ledger.model import LEDGERS
from ..orders import Invoice, TileOrder, invoice_totals, order_totals
from ..shipments import SOEntry

__all__ = [
    "OrdersSummary",
    "InvoiceSummary",
    "PipelineSummary",
    "FinanceSummary",
    "MonthlyOrders",
    "MonthlyFinance",
    "ActiveBalance",
    "orders_summary",
    "invoice_summary",
    "pipeline_summary",
    "finance_summary",
    "monthly_orders",
    "monthly_finance",
    "monthly_entries",
    "active_balances",
]


@dataclass(frozen=True)
class OrdersSummary:
    sft: float
    amount: float
    count: int


@dataclass(frozen=True)
class InvoiceSummary:
    total: float    # sum of invoice net
    pending: float  # sum of invoice rest
    count: int


@dataclass(frozen=True)
class PipelineSummary:
    total: int
    unloaded: int

    @property
    def in_transit(self) -> int:
        return self.total - self.unloaded


@dataclass(frozen=True)
class FinanceSummary:
    advance_in: float
    advance_out: float
    due_in: float
    due_out: float


@dataclass(frozen=True)
class MonthlyOrders:
    key: str
    label: str
    sft: float
    amount: float
    count: int


@dataclass(frozen=True)
class MonthlyFinance:
    key: str
    label: str
    advance_in: float
    advance_out: float
    due_in: float
    due_out: float


@dataclass(frozen=True)
class ActiveBalance:
    party: str
    last_date: str
    balance: float


# --------------------------- Totals ---------------------------

def orders_summary(orders: Iterable[TileOrder], packing: Optional[PackingTable] = None) -> OrdersSummary:
    sft = amount = ZERO
    count = 0
    for o in orders:
        t = order_totals(o, packing)
        sft += D(t.sft)
        amount += D(t.subtotal)
        count += 1
    return OrdersSummary(sft=float(sft), amount=float(amount), count=count)


def invoice_summary(invoices: Iterable[Invoice], packing: Optional[PackingTable] = None) -> InvoiceSummary:
    total = pending = ZERO
    count = 0
    for inv in invoices:
        t = invoice_totals(inv, packing)
        total += D(t.net)
        pending += D(t.rest)
        count += 1
    return InvoiceSummary(total=float(total), pending=float(pending), count=count)


def pipeline_summary(so_entries: Iterable[SOEntry]) -> PipelineSummary:
    entries = list(so_entries)
    return PipelineSummary(total=len(entries), unloaded=sum(1 for s in entries if s.is_unloaded))


_FINANCE_FIELD = {
    ADVANCE_RECEIPT: "advance_in",
    ADVANCE_ADJUSTMENT: "advance_out",
    DUE_CREATED: "due_in",
    DUE_PAYMENT: "due_out",
}


def _finance_sums(entries: Iterable[FinanceEntry]) -> dict[str, Decimal]:
    sums = {f: ZERO for f in _FINANCE_FIELD.values()}
    for e in entries:
        sums[_FINANCE_FIELD[e.kind]] += D(e.amount)
    return sums


def finance_summary(entries: Iterable[FinanceEntry]) -> FinanceSummary:
    return FinanceSummary(**{k: float(v) for k, v in _finance_sums(entries).items()})


# --------------------------- Monthly ---------------------------

def monthly_orders(orders: Iterable[TileOrder], packing: Optional[PackingTable] = None) -> list[MonthlyOrders]:
    buckets: dict[str, list[TileOrder]] = {}
    for o in orders:
        buckets.setdefault(month_key(o.date), []).append(o)

    out = []
    for key in sorted(buckets, reverse=True):
        s = orders_summary(buckets[key], packing)
        out.append(MonthlyOrders(key=key, label=month_label(key), sft=s.sft, amount=s.amount, count=s.count))
    return out


def monthly_finance(entries: Iterable[FinanceEntry]) -> list[MonthlyFinance]:
    buckets: dict[str, list[FinanceEntry]] = {}
    for e in entries:
        buckets.setdefault(month_key(e.date), []).append(e)

    out = []
    for key in sorted(buckets, reverse=True):
        sums = _finance_sums(buckets[key])
        out.append(MonthlyFinance(key=key, label=month_label(key), **{k: float(v) for k, v in sums.items()}))
    return out


def monthly_entries(entries: Iterable[FinanceEntry], month: str, ledger: str = ADVANCE_LEDGER) -> list[FinanceEntry]:
    """Entries dated in `month` ('YYYY-MM') that belong to one ledger, in input order."""
    return [e for e in entries if e.date.startswith(month) and ledger_of(e.kind) == ledger]


def active_balances(balances: Mapping[str, PartyBalance], ledger: str = ADVANCE_LEDGER) -> list[ActiveBalance]:
    """Parties whose advance (or due) balance is above zero."""
    if ledger not in LEDGERS:
        raise ValueError(f"ledger must be one of: {', '.join(LEDGERS)}")
    out = []
    for party, b in balances.items():
        value = b.advance_balance if ledger == ADVANCE_LEDGER else b.due_balance
        if value > 0:
            out.append(ActiveBalance(party=party, last_date=b.last_date, balance=value))
    return out
