# Shared pytest fixtures
from __future__ import annotations

import tempfile
from pathlib import Path

import pytest

from lab_agenda.models.record import Record

HEADER = (
    "Prontuário,Paciente,Data Nascimento,Nº Solicitação,Tipo Agenda,Hora Agenda,"
    "Data Agenda,Quantidade,Unidade,Laboratório Coleta,Status"
)


@pytest.fixture()
def temp_workdir(monkeypatch) -> Path:
    monkeypatch.delenv("LAB_AGENDA_CONFIG", raising=False)
    monkeypatch.delenv("LAB_AGENDA_SOURCE", raising=False)
    with tempfile.TemporaryDirectory() as d:
        p = Path(d)
        (p / "config").mkdir()
        (p / "data").mkdir()
        monkeypatch.chdir(p)
        yield p


@pytest.fixture()
def sample_config_yaml() -> str:
    return """source_file: ./data/agendamentos.csv
default_quota_limit: 10
quota_limits:
  PEROBAS: 6
  SANTA CRUZ: 6
  UNIDADE XV: 13
time_slots: ["07:00", "08:00", "09:00"]
"""


@pytest.fixture()
def write_config(temp_workdir: Path, sample_config_yaml: str) -> Path:
    cfg = temp_workdir / "config" / "agenda.yml"
    cfg.write_text(sample_config_yaml, encoding="utf-8")
    return cfg


@pytest.fixture()
def sample_csv_text() -> str:
    """13 PEROBAS appointments on 10/06/2024 plus a few other units and dirty rows."""
    lines = [HEADER]
    for i in range(13):
        lines.append(
            f'{2000 + i},"Paciente {i}, Teste",01/01/1980,{7000 + i},Rotina,07:00,10/06/2024,1,'
            "PEROBAS,Laboratório Central,Confirmado"
        )
    lines += [
        "3001,Maria Souza,12/04/1980,8001,Rotina,08:00,11/06/2024,1,Santa Cruz,Laboratório Norte,Pendente",
        "",
        "3002,Ana Lima,21/01/1990,8002,Urgente,09:00,2024-06-12,1,UNIDADE XV,Laboratório Norte,Realizado",
        "3003,Sem Data,03/03/1970,8003,Rotina,07:00,a definir,1,PEROBAS,Laboratório Central,Aguardando",
        "3004,Linha Curta,05/05/1985",
    ]
    return "\n".join(lines) + "\n"


@pytest.fixture()
def write_source(temp_workdir: Path, sample_csv_text: str) -> Path:
    src = temp_workdir / "data" / "agendamentos.csv"
    src.write_text(sample_csv_text, encoding="utf-8")
    return src


@pytest.fixture()
def make_record():
    """Factory building Records directly; Record interprets scheduled_date itself."""
    counter = iter(range(10_000))

    def _make(**fields: str) -> Record:
        return Record(id=next(counter), **fields)

    return _make
