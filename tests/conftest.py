# tests/conftest.py
# ---------------------------------------------------------------------
# Ground rules:
# - Engines are pure; no store, no network
# - Reference tables come from the shipped data (build_tables()), so
#   a local CERAMICS_TRADE_TABLES file never changes expectations
# - Fixed clocks/rngs wherever ids are generated
# ---------------------------------------------------------------------

from __future__ import annotations

import random

import pytest

from ceramics_trade.modules.catalog import build_tables
from ceramics_trade.modules.ledger import (
    ADVANCE_ADJUSTMENT,
    ADVANCE_RECEIPT,
    DUE_CREATED,
    DUE_PAYMENT,
    FinanceEntry,
)


@pytest.fixture(scope="session")
def tables():
    return build_tables()


@pytest.fixture()
def invoice_packing(tables):
    return tables.invoice_packing


@pytest.fixture()
def box_packing(tables):
    return tables.box_packing


@pytest.fixture()
def rng():
    return random.Random(1234)


@pytest.fixture()
def fixed_clock():
    """ms clock reading 1700000001250."""
    return lambda: 1_700_000_001.25


# ---------- Ledger history ----------
@pytest.fixture()
def ledger_entries() -> list[FinanceEntry]:
    """
    Rahim: advance 5000 in, 2000 adjusted -> 3000 left
    Karim: due 1500 created, 500 collected -> 1000 due
    Salam: fully adjusted advance -> 0 left
    """
    return [
        FinanceEntry("ADV-0001", "Rahim", ADVANCE_RECEIPT, 5000.0, "2026-09-02", phone="01711000000"),
        FinanceEntry("ADV-0002", "Rahim", ADVANCE_ADJUSTMENT, 2000.0, "2026-10-05"),
        FinanceEntry("DUE-0001", "Karim", DUE_CREATED, 1500.0, "2026-09-20", phone="01812000000"),
        FinanceEntry("DUE-0002", "Karim", DUE_PAYMENT, 500.0, "2026-10-11"),
        FinanceEntry("ADV-0003", "Salam", ADVANCE_RECEIPT, 800.0, "2026-08-14"),
        FinanceEntry("ADV-0004", "Salam", ADVANCE_ADJUSTMENT, 800.0, "2026-08-30"),
    ]
