"""
modules/catalog

Reference data the engines read but never write: packing constants, the
model catalogue and default rates.
"""
from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from typing import Any, Optional

from . import reference_data
from .packing import CatalogModel, PackingTable, ReferenceTableError, checked_pieces, normalize_size
from .rates import RateTable, suggest_models, suggestion_fields

__all__ = [
    "CatalogModel",
    "PackingTable",
    "RateTable",
    "ReferenceTables",
    "ReferenceTableError",
    "build_tables",
    "default_tables",
    "load_reference_tables",
    "normalize_size",
    "suggest_models",
    "suggestion_fields",
]

_log = logging.getLogger(__name__)


@dataclass(frozen=True)
class ReferenceTables:
    invoice_packing: PackingTable
    box_packing: PackingTable
    rates: RateTable
    models: tuple[CatalogModel, ...]


def _section(doc: dict, name: str, fallback: Any) -> Any:
    value = doc.get(name, fallback)
    if value is None:
        return fallback
    return value


def _parse_models(raw) -> tuple[CatalogModel, ...]:
    out = []
    for item in raw:
        if isinstance(item, dict):
            try:
                out.append(CatalogModel(str(item["model"]), str(item.get("series", "")), str(item["size"])))
            except KeyError as e:
                raise ReferenceTableError(f"Catalogue model is missing {e.args[0]!r}: {item!r}.") from e
        elif isinstance(item, (list, tuple)) and len(item) == 3:
            out.append(CatalogModel(*(str(x) for x in item)))
        else:
            raise ReferenceTableError(f"Unrecognised catalogue model entry: {item!r}.")
    return tuple(out)


def _parse_series_overrides(raw) -> dict[tuple[str, str], int]:
    """
    Either {(series, size): pieces} (the shipped form) or, from JSON, a list of
    {"series", "size", "pieces"} objects.
    """
    if isinstance(raw, dict):
        for key in raw:
            if not (isinstance(key, tuple) and len(key) == 2 and all(isinstance(k, str) for k in key)):
                raise ReferenceTableError(
                    f"Series override key must be (series, size), got {key!r}; "
                    "use a list of {series, size, pieces} objects in JSON."
                )
        return dict(raw)
    if not isinstance(raw, list):
        raise ReferenceTableError(f"Series overrides must be a list, got {type(raw).__name__}.")
    out = {}
    for item in raw:
        try:
            out[(item["series"], item["size"])] = checked_pieces(f"series override {item!r}", item["pieces"])
        except (KeyError, TypeError) as e:
            raise ReferenceTableError(f"Series override needs series/size/pieces: {item!r}.") from e
    return out


def build_tables(doc: Optional[dict] = None) -> ReferenceTables:
    """Build tables from a parsed JSON document; absent sections use the shipped data."""
    doc = doc or {}
    if not isinstance(doc, dict):
        raise ReferenceTableError("Reference tables document must be a JSON object.")

    models = _parse_models(_section(doc, "models", reference_data.MODELS))
    series = _parse_series_overrides(_section(doc, "series_overrides", reference_data.SERIES_OVERRIDES))
    return ReferenceTables(
        invoice_packing=PackingTable(_section(doc, "invoice_pieces_per_box", reference_data.INVOICE_PIECES_PER_BOX)),
        box_packing=PackingTable.from_series(
            _section(doc, "box_pieces_per_box", reference_data.BOX_PIECES_PER_BOX), series, models
        ),
        rates=RateTable(
            _section(doc, "default_rates", reference_data.DEFAULT_RATES),
            _section(doc, "special_rates", reference_data.SPECIAL_RATES),
        ),
        models=models,
    )


def load_reference_tables(path: str | Path | None = None) -> ReferenceTables:
    """
    Load tables from a JSON file, or the shipped tables when `path` is None.
    Raises ReferenceTableError when the file is unreadable or malformed.
    """
    if path is None:
        return build_tables()
    p = Path(path)
    try:
        doc = json.loads(p.read_text(encoding="utf-8"))
    except OSError as e:
        raise ReferenceTableError(f"Cannot read reference tables at {p}: {e}") from e
    except json.JSONDecodeError as e:
        raise ReferenceTableError(f"Reference tables at {p} are not valid JSON: {e}") from e
    _log.info("Loaded reference tables from %s", p)
    return build_tables(doc)


@lru_cache(maxsize=1)
def default_tables() -> ReferenceTables:
    """Tables from config.REFERENCE_TABLES_PATH (or the shipped data), loaded once."""
    from ...config import REFERENCE_TABLES_PATH

    return load_reference_tables(REFERENCE_TABLES_PATH)
