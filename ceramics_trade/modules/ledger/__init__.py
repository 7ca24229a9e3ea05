from .engine import (
    EntryOutcome,
    InsufficientBalance,
    InvalidEntry,
    PartyBalance,
    balances_as_of,
    eligible_parties,
    filter_entries,
    is_eligible,
    record_entry,
    remove_entry,
    validate,
)
from .model import (
    ADVANCE_ADJUSTMENT,
    ADVANCE_LEDGER,
    ADVANCE_RECEIPT,
    DUE_CREATED,
    DUE_LEDGER,
    DUE_PAYMENT,
    FinanceEntry,
    is_inflow,
    kind_label,
    ledger_of,
)
from .snapshots import entries_from_records, entry_from_record, entry_to_record

__all__ = [
    "ADVANCE_ADJUSTMENT",
    "ADVANCE_LEDGER",
    "ADVANCE_RECEIPT",
    "DUE_CREATED",
    "DUE_LEDGER",
    "DUE_PAYMENT",
    "EntryOutcome",
    "FinanceEntry",
    "InsufficientBalance",
    "InvalidEntry",
    "PartyBalance",
    "balances_as_of",
    "eligible_parties",
    "entries_from_records",
    "entry_from_record",
    "entry_to_record",
    "filter_entries",
    "is_eligible",
    "is_inflow",
    "kind_label",
    "ledger_of",
    "record_entry",
    "remove_entry",
    "validate",
]
