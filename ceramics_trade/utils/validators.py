# utils/validators.py
"""
Save-time checks for user input.

Business checks return human-readable problems instead of raising so the
caller decides how to message the user; the engines themselves assume
their preconditions (non-negative counts, known kinds) already hold.
"""
import math


def non_empty(text: str) -> bool:
    """
    True if `text` is not None/empty after stripping whitespace.
    """
    return bool(text and str(text).strip())


# ---- Numeric parsing ----

def try_parse_float(x):
    """
    Best-effort parse to float.

    Returns:
        (ok: bool, value: float|None)
    """
    try:
        return True, float(x)
    except (TypeError, ValueError):
        return False, None


def parse_float(x) -> float:
    """
    Strict parse to float; raises ValueError with a clear message on failure.
    """
    ok, val = try_parse_float(x)
    if not ok:
        raise ValueError(f"Could not parse '{x}' as a number.")
    return val  # type: ignore[return-value]


def number_or_zero(x) -> float:
    """
    Form-field coercion: blanks, junk and NaN become 0.0.
    Mirrors how an empty quantity/rate box contributes nothing to totals.
    """
    ok, val = try_parse_float(x)
    if not ok or val is None or val != val:
        return 0.0
    return val


def is_strictly_positive_number(x) -> bool:
    ok, val = try_parse_float(x)
    return bool(ok and val is not None and math.isfinite(val) and val > 0)


# ---- Document checks ----

def finance_entry_problems(party_name: str, amount) -> list[str]:
    """Problems blocking a ledger entry from being recorded (empty list = OK)."""
    if not non_empty(party_name) or not is_strictly_positive_number(amount):
        return ["Please fill Party Name and Amount"]
    return []


def order_problems(line_count: int) -> list[str]:
    if line_count <= 0:
        return ["Add at least one item"]
    return []


def invoice_problems(client_name: str, line_count: int) -> list[str]:
    problems = []
    if not non_empty(client_name):
        problems.append("Client Name is required")
    problems.extend(order_problems(line_count))
    return problems
