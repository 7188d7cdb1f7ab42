from __future__ import annotations

from pathlib import Path

from lab_agenda.cli import main as cli_main
from lab_agenda.logging.init import reset_logging


def test_cli_reports_quota_violation(write_config, write_source, capsys):
    reset_logging()
    code = cli_main([])
    out = capsys.readouterr().out
    assert code == 2
    assert "INFO Loaded 17 records from:" in out
    assert "WARN quota unit=PEROBAS date=10/06/2024 count=13 limit=6 excess=7" in out
    assert "INFO status none=1 success=14 warning=2" in out
    assert "SUMMARY records=17 filtered=17 violations=1 last_date=12/06/2024" in out


def test_cli_filters_remove_violation(write_config, write_source, capsys):
    reset_logging()
    code = cli_main(["--time", "08:00"])
    out = capsys.readouterr().out
    assert code == 0
    assert "INFO filters applied: 1 records" in out
    assert "INFO quota: all units within limit" in out
    assert "SUMMARY records=17 filtered=1 violations=0 last_date=11/06/2024" in out


def test_cli_date_filter(write_config, write_source, capsys):
    reset_logging()
    code = cli_main(["--date", "2024-06-10", "--search", "paciente 1"])
    out = capsys.readouterr().out
    assert code == 0
    # "Paciente 1, Teste" and "Paciente 10..12, Teste"
    assert "filtered=4 " in out


def test_cli_unknown_time_slot_warns(write_config, write_source, capsys):
    reset_logging()
    cli_main(["--time", "10:00"])
    out = capsys.readouterr().out
    assert "WARN time slot '10:00' is not one of" in out
    assert "filtered=0 " in out
    assert "INFO no appointment found" in out
    assert "last_date=- days_to_last=-" in out


def test_cli_bad_date_value(write_config, write_source, capsys):
    reset_logging()
    code = cli_main(["--date", "someday"])
    out = capsys.readouterr().out
    assert code == 1
    assert "ERROR filters: unreadable --date value" in out


def test_cli_out_of_range_date_value(write_config, write_source, capsys):
    reset_logging()
    code = cli_main(["--date", "99999999999999999999/01/2024"])
    out = capsys.readouterr().out
    assert code == 1
    assert "ERROR filters: unreadable --date value" in out


def test_cli_config_missing(temp_workdir: Path, capsys):
    reset_logging()
    code = cli_main([])
    out = capsys.readouterr().out
    assert code == 1
    assert "ERROR config: config file not found" in out


def test_cli_source_missing(write_config, capsys):
    reset_logging()
    code = cli_main([])
    out = capsys.readouterr().out
    assert code == 1
    assert "ERROR source: source file not found" in out


def test_cli_source_override_and_env_config(temp_workdir: Path, sample_config_yaml, sample_csv_text, monkeypatch, capsys):
    reset_logging()
    cfg = temp_workdir / "custom.yml"
    cfg.write_text(sample_config_yaml, encoding="utf-8")
    src = temp_workdir / "other.csv"
    src.write_text(sample_csv_text, encoding="utf-8")
    monkeypatch.setenv("LAB_AGENDA_CONFIG", str(cfg))
    code = cli_main(["--source", str(src)])
    out = capsys.readouterr().out
    assert code == 2
    assert f"Loaded 17 records from: {src}" in out


def test_cli_env_file_sets_source(write_config, temp_workdir: Path, sample_csv_text, monkeypatch, capsys):
    reset_logging()
    src = temp_workdir / "from_env.csv"
    src.write_text(sample_csv_text, encoding="utf-8")
    (temp_workdir / ".env").write_text(f"LAB_AGENDA_SOURCE={src}\n", encoding="utf-8")
    # registered so the value written by .env is undone after the test
    monkeypatch.setenv("LAB_AGENDA_SOURCE", "")
    code = cli_main([])
    out = capsys.readouterr().out
    assert code == 2
    assert "from_env.csv" in out


def test_cli_debug_mode(write_config, write_source, capsys):
    reset_logging()
    cli_main(["--debug"])
    out = capsys.readouterr().out
    assert "DEBUG debug mode enabled" in out
    assert "DEBUG day=10/06/2024 patients=13" in out
    reset_logging()


def test_cli_inspect_data(write_config, write_source, capsys):
    reset_logging()
    code = cli_main(["--inspect-data"])
    out = capsys.readouterr().out
    assert code == 0
    assert "SOURCE: agendamentos.csv rows=17" in out
    assert "header=['Prontuário', 'Paciente'," in out
    assert "sample_rows=" in out
    assert "unparseable_dates=2" in out
    assert "SUMMARY" not in out


def test_cli_export(write_config, write_source, temp_workdir: Path, capsys):
    reset_logging()
    target = temp_workdir / "out.csv"
    code = cli_main(["--export", str(target), "--year", "2024"])
    out = capsys.readouterr().out
    assert code == 2
    assert target.exists()
    assert f"INFO exported 15 records to {target}" in out


def test_cli_export_nothing(write_config, write_source, temp_workdir: Path, capsys):
    reset_logging()
    code = cli_main(["--export", str(temp_workdir / "x.xlsx"), "--year", "1999"])
    out = capsys.readouterr().out
    assert code == 1
    assert "ERROR export: no records to export" in out
