# modules/ledger/model.py
from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Optional

# ---------- Canonical kinds ----------
ADVANCE_RECEIPT = "ADVANCE_RECEIPT"
ADVANCE_ADJUSTMENT = "ADVANCE_ADJUSTMENT"
DUE_CREATED = "DUE_CREATED"
DUE_PAYMENT = "DUE_PAYMENT"

VALID_KINDS: tuple[str, ...] = (ADVANCE_RECEIPT, ADVANCE_ADJUSTMENT, DUE_CREATED, DUE_PAYMENT)

# Kinds that create a balance; any party name (new or known) may use them
CREATION_KINDS = frozenset({ADVANCE_RECEIPT, DUE_CREATED})

# Names used in stored rows
WIRE_NAMES = {
    ADVANCE_RECEIPT: "ADVANCE_ENTRY",
    ADVANCE_ADJUSTMENT: "ADVANCE_ADJ",
    DUE_CREATED: "DUE_ENTRY",
    DUE_PAYMENT: "DUE_PAYMENT",
}
_FROM_WIRE = {v: k for k, v in WIRE_NAMES.items()}

LABELS = {
    ADVANCE_RECEIPT: "Advance Receipt",
    ADVANCE_ADJUSTMENT: "Adjustment",
    DUE_CREATED: "Due Created",
    DUE_PAYMENT: "Collection",
}

ADVANCE_LEDGER = "advance"
DUE_LEDGER = "due"
LEDGERS: tuple[str, ...] = (ADVANCE_LEDGER, DUE_LEDGER)

ID_PREFIXES = {ADVANCE_LEDGER: "ADV", DUE_LEDGER: "DUE"}


def normalize_kind(kind: Optional[str]) -> Optional[str]:
    """Upper-case and map stored names (ADVANCE_ENTRY, ...) to canonical kinds; None if unknown."""
    if kind is None:
        return None
    k = str(kind).strip().upper()
    k = _FROM_WIRE.get(k, k)
    return k if k in VALID_KINDS else None


def ensure_valid_kind(kind: str) -> str:
    k = normalize_kind(kind)
    if k is None:
        raise ValueError(f"kind must be one of: {', '.join(VALID_KINDS)}")
    return k


def ledger_of(kind: str) -> str:
    return ADVANCE_LEDGER if ensure_valid_kind(kind).startswith("ADVANCE") else DUE_LEDGER


def id_prefix(kind: str) -> str:
    return ID_PREFIXES[ledger_of(kind)]


def kind_label(kind: str) -> str:
    """Human label ('Collection'). Unknown kinds come back title-cased."""
    k = normalize_kind(kind)
    if k is not None:
        return LABELS[k]
    return str(kind or "").replace("_", " ").strip().title()


def is_inflow(kind: str) -> bool:
    """Cash coming in: an advance received or a due collected (shown with '+')."""
    return ensure_valid_kind(kind) in (ADVANCE_RECEIPT, DUE_PAYMENT)


@dataclass(frozen=True)
class FinanceEntry:
    """
    One ledger transaction. Append-only: a correction is a new entry or a
    deletion, never an edit of amount/kind.
    """
    id: str
    party_name: str
    kind: str
    amount: float
    date: str
    phone: str = ""
    remarks: str = ""

    def __post_init__(self):
        k = ensure_valid_kind(self.kind)
        if k != self.kind:
            object.__setattr__(self, "kind", k)
        try:
            amount = float(self.amount)
        except (TypeError, ValueError) as e:
            raise ValueError(f"amount must be a number, got {self.amount!r}") from e
        if not math.isfinite(amount) or amount <= 0:
            raise ValueError(f"amount must be greater than zero, got {self.amount!r}")

    @property
    def ledger(self) -> str:
        return ledger_of(self.kind)
