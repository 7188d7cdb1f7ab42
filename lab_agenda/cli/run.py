from __future__ import annotations

import argparse
import logging
import os
import sys
from collections import Counter
from pathlib import Path

from dotenv import load_dotenv

from ..config.loader import ConfigError, load_config, resolve_config_path
from ..export.writer import ExportError, default_export_name, export_records
from ..logging.init import log_summary, setup_logging
from ..models.config_models import AgendaConfig
from ..models.criteria import FilterCriteria
from ..services.filters import filter_records
from ..services.metrics import available_years, count_by_date, days_to_next_appointment
from ..services.quota import check_quota_violations
from ..services.status import classify_status
from ..services.summary import render_summary_line
from ..tabular.dates import format_date, parse_date
from ..tabular.normalizer import build_batch
from ..tabular.parser import parse_header

"""CLI entrypoint.

Flow:
- Load .env, then config (--config > LAB_AGENDA_CONFIG > config/agenda.yml)
- Read the CSV export (--source > LAB_AGENDA_SOURCE > config source_file)
- Build the batch, apply filters, report quota alerts and metrics
- Print the SUMMARY line; optionally export the filtered records

Exit codes: 0 = no quota violation, 2 = violations found, 1 = fatal.
"""

EXIT_SUCCESS = 0
EXIT_FATAL = 1
EXIT_VIOLATIONS = 2

SOURCE_ENV_VAR = "LAB_AGENDA_SOURCE"
CHART_DAYS = 10


class SourceError(Exception):
    """Raised when the CSV export cannot be read."""


def _load_env_file(path: Path, override: bool = True) -> None:
    """Load .env using python-dotenv (values in the file win over the process env)."""
    if path.exists():
        load_dotenv(dotenv_path=path, override=override)


def _read_source(path: Path) -> str:
    if not path.exists():
        raise SourceError(f"source file not found: {path}")
    try:
        # utf-8-sig: spreadsheet exports often start with a BOM
        return path.read_text(encoding="utf-8-sig")
    except (OSError, UnicodeDecodeError) as e:
        raise SourceError(f"cannot read {path}: {e}") from e


def _parse_args(argv: list[str]) -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Laboratory collection appointments: filters, quota alerts, metrics")
    p.add_argument("--config", help="Path to YAML config (default: config/agenda.yml)")
    p.add_argument("--source", help="CSV export to analyze (overrides config source_file)")
    p.add_argument("--month", type=int, choices=range(1, 13), metavar="1-12", help="Keep appointments in this month")
    p.add_argument("--year", type=int, help="Keep appointments in this year")
    p.add_argument("--date", help="Keep appointments on this day (DD/MM/YYYY or YYYY-MM-DD)")
    p.add_argument("--time", action="append", default=[], help="Allowed scheduled time, repeatable (e.g. 07:00)")
    p.add_argument("--search", help="Case-insensitive text search over every column")
    p.add_argument(
        "--export",
        nargs="?",
        const="",
        default=None,
        help="Export filtered records to .xlsx/.csv (no value: Agendamentos_<timestamp>.xlsx)",
    )
    p.add_argument("--debug", action="store_true", help="Enable debug logging")
    p.add_argument("--inspect-data", action="store_true", help="Print header & first rows then exit")
    return p.parse_args(argv)


def _criteria_from_args(
    args: argparse.Namespace, cfg: AgendaConfig, logger: logging.Logger
) -> FilterCriteria:
    on_date = None
    if args.date:
        on_date = parse_date(args.date)
        if on_date is None:
            raise ValueError(f"unreadable --date value: {args.date!r}")
    for t in args.time:
        if t.strip() not in cfg.time_slots:
            logger.warning(f"time slot {t!r} is not one of {list(cfg.time_slots)}")
    return FilterCriteria.build(
        month=args.month,
        year=args.year,
        on_date=on_date,
        times=args.time or None,
        text=args.search,
    )


def _inspect_data(text: str, source: Path, cfg: AgendaConfig) -> int:
    batch = build_batch(text, cfg.schema)
    print(f"SOURCE: {source.name} rows={len(batch)}")
    print(f"  header={parse_header(text)}")
    print("  sample_rows=", [r.as_dict() for r in batch.records[:3]])
    print(f"  unparseable_dates={batch.unparseable_dates}")
    return EXIT_SUCCESS


def main(argv: list[str] | None = None) -> int:
    # only None reads sys.argv, so tests can call main([])
    if argv is None:
        argv = sys.argv[1:]
    args = _parse_args(argv)
    logger = setup_logging(debug=args.debug)
    if args.debug:
        logger.debug("debug mode enabled")

    _load_env_file(Path(".env"), override=True)
    config_path = resolve_config_path(args.config)
    try:
        cfg = load_config(config_path)
    except ConfigError as e:
        logger.error(f"config: {e}")
        return EXIT_FATAL

    source = Path(args.source or os.getenv(SOURCE_ENV_VAR) or cfg.source_file)
    try:
        text = _read_source(source)
    except SourceError as e:
        logger.error(f"source: {e}")
        return EXIT_FATAL

    if args.inspect_data:
        return _inspect_data(text, source, cfg)

    batch = build_batch(text, cfg.schema)
    logger.info(f"Loaded {len(batch)} records from: {source}")
    if batch.unparseable_dates:
        logger.debug(f"records with unreadable scheduled date: {batch.unparseable_dates}")

    try:
        criteria = _criteria_from_args(args, cfg, logger)
    except ValueError as e:
        logger.error(f"filters: {e}")
        return EXIT_FATAL

    filtered = filter_records(batch.records, criteria)
    if not criteria.is_empty:
        logger.info(f"filters applied: {len(filtered)} records")
    logger.info(f"years={available_years(batch.records)}")
    statuses = Counter(classify_status(r.status) for r in filtered)
    logger.info("status " + " ".join(f"{k}={v}" for k, v in sorted(statuses.items())))

    for day, count in count_by_date(filtered, last=CHART_DAYS):
        logger.debug(f"day={format_date(day)} patients={count}")

    violations = check_quota_violations(filtered, cfg.quota)
    if violations:
        for v in violations:
            logger.warning(
                f"quota unit={v.unit} date={format_date(v.date)} "
                f"count={v.count} limit={v.limit} excess={v.excess}"
            )
    else:
        logger.info("quota: all units within limit")

    days = days_to_next_appointment(filtered)
    if days is None:
        logger.info("no appointment found")
    elif days.days < 0:
        logger.info(f"last appointment {format_date(days.last_date)} already passed ({days.days} days)")
    elif days.days == 0:
        logger.info("last appointment is today")
    else:
        logger.info(f"days to last appointment: {days.days} ({format_date(days.last_date)})")

    if args.export is not None:
        target = Path(args.export) if args.export else Path(default_export_name())
        try:
            export_records(filtered, target)
        except ExportError as e:
            logger.error(f"export: {e}")
            return EXIT_FATAL
        logger.info(f"exported {len(filtered)} records to {target}")

    summary_line = render_summary_line(len(batch), len(filtered), len(violations), days)
    # log_summary adds the "SUMMARY " label itself
    log_summary(summary_line[len("SUMMARY "):])

    return EXIT_VIOLATIONS if violations else EXIT_SUCCESS
