# modules/catalog/rates.py
from __future__ import annotations

from typing import Iterable, Mapping, Optional

from .packing import CatalogModel, ReferenceTableError, normalize_model, normalize_size


def _checked_rate(where: str, value) -> float:
    if isinstance(value, bool):
        raise ReferenceTableError(f"{where}: rate must be a number, got {value!r}.")
    try:
        rate = float(value)
    except (TypeError, ValueError) as e:
        raise ReferenceTableError(f"{where}: rate must be a number, got {value!r}.") from e
    if rate < 0 or rate != rate:
        raise ReferenceTableError(f"{where}: rate must be non-negative, got {value!r}.")
    return rate


class RateTable:
    """Default sale rate per sft: model special first, then the size default."""

    def __init__(self, defaults: Mapping[str, float], specials: Optional[Mapping[str, float]] = None):
        self._defaults = {normalize_size(k): _checked_rate(f"size {k!r}", v) for k, v in (defaults or {}).items()}
        self._specials = {normalize_model(k): _checked_rate(f"model {k!r}", v) for k, v in (specials or {}).items()}

    def default_rate(self, model: Optional[str], size: Optional[str]) -> float:
        special = self._specials.get(normalize_model(model))
        if special is not None:
            return special
        return self._defaults.get(normalize_size(size), 0.0)


def suggest_models(query: str, catalog: Iterable[CatalogModel], limit: int = 8) -> list[CatalogModel]:
    """Catalogue models whose name contains `query` (case-insensitive), at most `limit`."""
    q = normalize_model(query)
    if not q:
        return []
    out: list[CatalogModel] = []
    for m in catalog:
        if q in normalize_model(m.model):
            out.append(m)
            if len(out) >= limit:
                break
    return out


def suggestion_fields(model: CatalogModel, rates: RateTable) -> dict:
    """Fields filled into an order row when a suggested model is picked."""
    length, width = model.dimensions
    return {
        "model": model.model,
        "size": model.size,
        "length": length,
        "width": width,
        "rate": rates.default_rate(model.model, model.size),
    }
