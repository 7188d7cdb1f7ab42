from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

from .record import RECORD_FIELDS

"""Config dataclasses for the appointment analytics engine.

These are the typed, immutable forms of the configuration consumed by the
core: the column schema used to read positional rows, the per-unit daily
quota table and the recognized time-of-day labels. The YAML loader in
lab_agenda/config/loader.py builds them; every query receives them read-only.
"""

__all__ = [
    "DEFAULT_COLUMNS",
    "DEFAULT_QUOTA_LIMIT",
    "DEFAULT_QUOTA_LIMITS",
    "DEFAULT_TIME_SLOTS",
    "AgendaConfig",
    "ColumnSchema",
    "QuotaLimitTable",
    "normalize_unit_name",
]

DEFAULT_COLUMNS: dict[str, int] = {name: index for index, name in enumerate(RECORD_FIELDS)}

DEFAULT_QUOTA_LIMIT = 10

DEFAULT_QUOTA_LIMITS: dict[str, int] = {
    "AGUA BRANCA": 11,
    "CSU ELDORADO": 13,
    "JARDIM BANDEIRANTES": 13,
    "JARDIM ELDORADO": 9,
    "NOVO ELDORADO": 10,
    "PARQUE SÃO JOÃO": 13,
    "PEROBAS": 6,
    "SANTA CRUZ": 6,
    "UNIDADE XV": 13,
}

DEFAULT_TIME_SLOTS: tuple[str, ...] = ("07:00", "08:00", "09:00")


def normalize_unit_name(name: str | None) -> str:
    """Uppercase + trim. Used for grouping keys and limit lookup, never for display."""
    if not name:
        return ""
    return str(name).upper().strip()


@dataclass(frozen=True)
class ColumnSchema:
    """Ordered (field name, column index) pairs describing the source table.

    One schema is shared by every row of a batch.
    """
    columns: tuple[tuple[str, int], ...]

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, int]) -> ColumnSchema:
        unknown = set(mapping) - set(RECORD_FIELDS)
        if unknown:
            raise ValueError(f"unknown record fields: {sorted(unknown)}")
        # unlisted fields keep their default position
        merged = {**DEFAULT_COLUMNS, **mapping}
        return cls(columns=tuple((name, int(merged[name])) for name in RECORD_FIELDS))

    @classmethod
    def default(cls) -> ColumnSchema:
        return cls.from_mapping(DEFAULT_COLUMNS)

    @property
    def width(self) -> int:
        """Minimum number of fields a row needs to fill every attribute."""
        return max((index for _, index in self.columns), default=-1) + 1

    def __iter__(self):
        return iter(self.columns)


@dataclass(frozen=True)
class QuotaLimitTable:
    """Daily appointment limit per unit, keyed by normalized unit name.

    Units absent from the table fall back to ``default_limit``.
    """
    limits: Mapping[str, int] = field(default_factory=lambda: MappingProxyType({}))
    default_limit: int = DEFAULT_QUOTA_LIMIT

    @classmethod
    def from_mapping(
        cls, limits: Mapping[str, int], default_limit: int = DEFAULT_QUOTA_LIMIT
    ) -> QuotaLimitTable:
        normalized = {normalize_unit_name(unit): int(limit) for unit, limit in limits.items()}
        return cls(limits=MappingProxyType(normalized), default_limit=int(default_limit))

    @classmethod
    def default(cls) -> QuotaLimitTable:
        return cls.from_mapping(DEFAULT_QUOTA_LIMITS, DEFAULT_QUOTA_LIMIT)

    def limit_for(self, unit: str | None) -> int:
        key = normalize_unit_name(unit)
        if key in self.limits:
            return self.limits[key]
        return self.default_limit


@dataclass(frozen=True)
class AgendaConfig:
    """Root configuration object loaded from config/agenda.yml."""
    source_file: str  # CSV export to analyze
    schema: ColumnSchema
    quota: QuotaLimitTable
    time_slots: tuple[str, ...] = DEFAULT_TIME_SLOTS

    @classmethod
    def with_defaults(cls, source_file: str, time_slots: Iterable[str] | None = None) -> AgendaConfig:
        return cls(
            source_file=source_file,
            schema=ColumnSchema.default(),
            quota=QuotaLimitTable.default(),
            time_slots=tuple(time_slots) if time_slots is not None else DEFAULT_TIME_SLOTS,
        )
