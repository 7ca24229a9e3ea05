# modules/catalog/packing.py
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable, Mapping, Optional

_log = logging.getLogger(__name__)


class ReferenceTableError(ValueError):
    """A reference table is malformed; computation must not continue on it."""


def normalize_size(size: Optional[str]) -> str:
    """'20x20 ' -> '20X20'. Empty/None -> ''."""
    return str(size or "").strip().upper().replace(" ", "")


def normalize_model(model: Optional[str]) -> str:
    return str(model or "").strip().upper()


@dataclass(frozen=True)
class CatalogModel:
    model: str
    series: str
    size: str

    @property
    def dimensions(self) -> tuple[float, float]:
        """(length, width) parsed from the size key; (0, 0) if it is not 'LxW'."""
        parts = normalize_size(self.size).split("X")
        if len(parts) != 2:
            return 0.0, 0.0
        try:
            return float(parts[0]), float(parts[1])
        except ValueError:
            return 0.0, 0.0


def checked_pieces(where: str, value) -> int:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ReferenceTableError(f"{where}: pieces per box must be a number, got {value!r}.")
    if value < 0 or int(value) != value:
        raise ReferenceTableError(f"{where}: pieces per box must be a non-negative integer, got {value!r}.")
    return int(value)


class PackingTable:
    """
    Two-tier pieces-per-box lookup.

    1. exact (model, size) override
    2. size default

    Unknown sizes resolve to 0, which the converters treat as "no packing
    information" rather than an error.
    """

    def __init__(
        self,
        defaults: Mapping[str, int],
        overrides: Optional[Mapping[tuple[str, str], int]] = None,
    ):
        self._defaults: dict[str, int] = {}
        for size, pcs in (defaults or {}).items():
            self._defaults[normalize_size(size)] = checked_pieces(f"size {size!r}", pcs)

        self._overrides: dict[tuple[str, str], int] = {}
        for key, pcs in (overrides or {}).items():
            try:
                model, size = key
            except (TypeError, ValueError) as e:
                raise ReferenceTableError(f"Override key must be (model, size), got {key!r}.") from e
            k = (normalize_model(model), normalize_size(size))
            self._overrides[k] = checked_pieces(f"override {key!r}", pcs)

    @classmethod
    def from_series(
        cls,
        defaults: Mapping[str, int],
        series_overrides: Mapping[tuple[str, str], int],
        catalog: Iterable[CatalogModel],
    ) -> "PackingTable":
        """Expand (series, size) overrides to exact (model, size) entries for every catalogue model."""
        wanted = {(normalize_model(s), normalize_size(z)): p for (s, z), p in series_overrides.items()}
        overrides: dict[tuple[str, str], int] = {}
        for m in catalog:
            key = (normalize_model(m.series), normalize_size(m.size))
            if key in wanted:
                overrides[(m.model, m.size)] = wanted[key]
        return cls(defaults, overrides)

    def pieces_per_box(self, size: Optional[str], model: Optional[str] = None) -> int:
        size_key = normalize_size(size)
        if model:
            hit = self._overrides.get((normalize_model(model), size_key))
            if hit is not None:
                return hit
        pcs = self._defaults.get(size_key, 0)
        if not pcs:
            _log.debug("No packing info for size %r (model %r).", size_key, model)
        return pcs

    def sizes(self) -> list[str]:
        return sorted(self._defaults)

    def __contains__(self, size: object) -> bool:
        return normalize_size(size) in self._defaults  # type: ignore[arg-type]
