from __future__ import annotations

from dataclasses import FrozenInstanceError
from datetime import date

import pytest

from lab_agenda.models.analysis import QuotaViolation
from lab_agenda.models.batch import Batch
from lab_agenda.models.config_models import (
    DEFAULT_QUOTA_LIMIT,
    AgendaConfig,
    ColumnSchema,
    QuotaLimitTable,
    normalize_unit_name,
)
from lab_agenda.models.record import RECORD_FIELDS, ParsedDate, Record


def test_record_defaults_and_immutability():
    record = Record(id=0)
    assert record.as_dict() == {name: "" for name in RECORD_FIELDS}
    assert record.scheduled == ParsedDate(raw="")
    assert record.scheduled_on is None

    with pytest.raises(FrozenInstanceError):
        record.unit = "PEROBAS"  # type: ignore[misc]


def test_record_derives_scheduled_from_text():
    record = Record(id=0, scheduled_date="10/06/2024")
    assert record.scheduled == ParsedDate(raw="10/06/2024", value=date(2024, 6, 10))
    assert record.scheduled_on == date(2024, 6, 10)

    assert Record(id=1, scheduled_date="a definir").scheduled.unparseable


def test_record_replaces_mismatched_scheduled():
    stale = ParsedDate(raw="01/01/2020", value=date(2020, 1, 1))
    record = Record(id=0, scheduled_date="10/06/2024", scheduled=stale)
    assert record.scheduled_on == date(2024, 6, 10)

    kept = ParsedDate(raw="10/06/2024", value=date(2024, 6, 10))
    assert Record(id=0, scheduled_date="10/06/2024", scheduled=kept).scheduled is kept


def test_record_values_include_id_first():
    record = Record(id=7, patient_name="Maria", unit="PEROBAS")
    values = record.values()
    assert values[0] == "7"
    assert "Maria" in values and "PEROBAS" in values
    assert len(values) == len(RECORD_FIELDS) + 1


def test_quota_violation_excess():
    v = QuotaViolation(unit="PEROBAS", date=date(2024, 6, 10), count=13, limit=6)
    assert v.excess == 7


def test_normalize_unit_name():
    assert normalize_unit_name("  Parque São João ") == "PARQUE SÃO JOÃO"
    assert normalize_unit_name("") == ""
    assert normalize_unit_name(None) == ""


def test_column_schema_default_layout():
    schema = ColumnSchema.default()
    assert list(schema) == [(name, i) for i, name in enumerate(RECORD_FIELDS)]
    assert schema.width == 11


def test_column_schema_partial_override_keeps_defaults():
    schema = ColumnSchema.from_mapping({"status": 12})
    assert dict(schema)["status"] == 12
    assert dict(schema)["unit"] == 8
    assert schema.width == 13


def test_column_schema_rejects_unknown_field():
    with pytest.raises(ValueError):
        ColumnSchema.from_mapping({"nope": 1})


def test_quota_limit_table_lookup_normalized():
    table = QuotaLimitTable.from_mapping({" perobas ": 6}, default_limit=10)
    assert table.limits == {"PEROBAS": 6}
    assert table.limit_for("Perobas") == 6
    assert table.limit_for("  PEROBAS") == 6
    assert table.limit_for("OUTRA") == 10
    assert table.limit_for("") == 10


def test_quota_limit_table_is_read_only():
    table = QuotaLimitTable.default()
    with pytest.raises(TypeError):
        table.limits["PEROBAS"] = 99  # type: ignore[index]
    assert table.default_limit == DEFAULT_QUOTA_LIMIT
    assert table.limit_for("SANTA CRUZ") == 6


def test_agenda_config_with_defaults():
    cfg = AgendaConfig.with_defaults("data.csv")
    assert cfg.source_file == "data.csv"
    assert cfg.time_slots == ("07:00", "08:00", "09:00")
    assert cfg.quota.limit_for("UNIDADE XV") == 13


def test_batch_snapshot():
    records = (
        Record(id=0, scheduled_date="10/06/2024"),
        Record(id=1, scheduled_date="?"),
    )
    batch = Batch(records=records, schema=ColumnSchema.default())
    assert len(batch) == 2
    assert list(batch) == list(records)
    assert batch.unparseable_dates == 1
    assert batch.loaded_at.tzinfo is not None
    with pytest.raises(FrozenInstanceError):
        batch.records = ()  # type: ignore[misc]
