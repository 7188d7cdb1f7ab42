#!/usr/bin/env python3
"""Synthetic appointment export generator.

Generates a CSV file laid out like the collection-schedule spreadsheet export:
- Line 1: header with the source headings
- Line 2+: one appointment per line

Useful for trying the CLI on realistic volumes and for performance checks.
Some rows are deliberately dirty (quoted commas, unreadable dates, empty
units, short rows) so the degradation paths get exercised too.
"""
from __future__ import annotations

import argparse
import sys
from pathlib import Path

import numpy as np
import pandas as pd

from lab_agenda.export.writer import EXPORT_HEADINGS
from lab_agenda.models.config_models import DEFAULT_QUOTA_LIMITS, DEFAULT_TIME_SLOTS
from lab_agenda.models.record import RECORD_FIELDS

FIRST_NAMES = ["Maria", "João", "Ana", "José", "Francisca", "Antônio", "Adriana", "Carlos", "Juliana", "Paulo"]
LAST_NAMES = ["Silva", "Santos", "Oliveira", "Souza", "Lima", "Pereira", "Ferreira", "Costa", "Rodrigues", "Almeida"]
SCHEDULE_TYPES = ["Rotina", "Urgente", "Retorno"]
LABS = ["Laboratório Central", "Laboratório Norte"]
STATUSES = ["Confirmado", "Pendente", "Aguardando coleta", "Realizado", "Cancelado"]


def generate_synthetic_data(
    rows: int, start: str = "2024-01-01", end: str = "2024-12-31", dirty_ratio: float = 0.02, seed: int = 42
) -> pd.DataFrame:
    """Generate a DataFrame of appointments using the source headings as columns.

    Args:
        rows: Number of appointments to generate
        start: First scheduled day (ISO)
        end: Last scheduled day (ISO)
        dirty_ratio: Share of rows with an unreadable date or empty unit
        seed: Random seed for reproducible data

    Returns:
        DataFrame with one string column per source heading
    """
    rng = np.random.default_rng(seed)

    days = pd.date_range(start, end, freq="B")
    units = list(DEFAULT_QUOTA_LIMITS) + ["UNIDADE NOVA"]  # one unit without a configured limit

    names = [
        f"{rng.choice(FIRST_NAMES)} {rng.choice(LAST_NAMES)}, {rng.choice(LAST_NAMES)}"
        for _ in range(rows)
    ]
    birth = pd.to_datetime(rng.integers(
        pd.Timestamp("1940-01-01").value // 10**9, pd.Timestamp("2015-12-31").value // 10**9, rows
    ), unit="s")
    scheduled = rng.choice(days, rows)

    data = {
        "record_id": [str(100000 + i) for i in range(rows)],
        "patient_name": names,
        "birth_date": [d.strftime("%d/%m/%Y") for d in birth],
        "request_number": rng.integers(500000, 999999, rows).astype(str).tolist(),
        "schedule_type": rng.choice(SCHEDULE_TYPES, rows).tolist(),
        "scheduled_time": rng.choice(list(DEFAULT_TIME_SLOTS), rows).tolist(),
        "scheduled_date": [pd.Timestamp(d).strftime("%d/%m/%Y") for d in scheduled],
        "quantity": rng.integers(1, 4, rows).astype(str).tolist(),
        "unit": rng.choice(units, rows).tolist(),
        "collection_lab": rng.choice(LABS, rows).tolist(),
        "status": rng.choice(STATUSES, rows).tolist(),
    }
    df = pd.DataFrame(data, columns=list(RECORD_FIELDS))

    dirty = rng.random(rows) < dirty_ratio
    half = rng.random(rows) < 0.5
    df.loc[dirty & half, "scheduled_date"] = "a definir"
    df.loc[dirty & ~half, "unit"] = ""
    return df.rename(columns=EXPORT_HEADINGS)


def create_csv_file(output_path: Path, df: pd.DataFrame) -> None:
    """Write ``df`` as the comma-separated export (every field quoted)."""
    output_path.parent.mkdir(parents=True, exist_ok=True)
    df.to_csv(output_path, index=False, quoting=1, encoding="utf-8")

    print(f"Created CSV file: {output_path}")
    print(f"  Rows: {len(df):,} (+ 1 header line)")
    print(f"  Columns: {len(df.columns)}")


def main() -> int:
    parser = argparse.ArgumentParser(
        description="Generate a synthetic appointment export",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # 5k appointments during 2024
  %(prog)s data/agendamentos.csv

  # Larger dataset, different period
  %(prog)s big.csv --rows 200000 --start 2023-01-01 --end 2025-06-30
        """,
    )
    parser.add_argument("output", type=Path, help="Output CSV path")
    parser.add_argument("--rows", type=int, default=5_000, help="Number of appointments (default: 5,000)")
    parser.add_argument("--start", default="2024-01-01", help="First scheduled day (default: 2024-01-01)")
    parser.add_argument("--end", default="2024-12-31", help="Last scheduled day (default: 2024-12-31)")
    parser.add_argument("--dirty-ratio", type=float, default=0.02, help="Share of dirty rows (default: 0.02)")
    parser.add_argument("--seed", type=int, default=42, help="Random seed (default: 42)")
    args = parser.parse_args()

    if args.rows <= 0:
        print("Error: --rows must be positive", file=sys.stderr)
        return 1
    if not 0 <= args.dirty_ratio <= 1:
        print("Error: --dirty-ratio must be between 0 and 1", file=sys.stderr)
        return 1

    try:
        df = generate_synthetic_data(args.rows, args.start, args.end, args.dirty_ratio, args.seed)
        create_csv_file(args.output, df)
    except (ValueError, OSError) as e:
        print(f"\nError generating dataset: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
