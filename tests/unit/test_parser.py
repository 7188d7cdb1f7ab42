from __future__ import annotations

from lab_agenda.tabular.parser import parse_header, parse_line, parse_rows


def test_parse_line_simple_fields():
    assert parse_line("a,b,c") == ["a", "b", "c"]


def test_parse_line_quoted_delimiter_is_one_field():
    assert parse_line('1,"Doe, Jane",x') == ["1", "Doe, Jane", "x"]


def test_parse_line_trims_fields():
    assert parse_line("  a ,  b,c  ") == ["a", "b", "c"]


def test_parse_line_empty_fields_kept():
    assert parse_line("a,,c,") == ["a", "", "c", ""]


def test_parse_line_doubled_quote_toggles_twice():
    """A doubled quote is two toggles, not an escaped literal quote."""
    # "Say ""hi"", ok" -> quotes vanish; the comma after hi"" is inside quotes again
    assert parse_line('"Say ""hi"", ok",z') == ["Say hi, ok", "z"]


def test_parse_line_unbalanced_quote_does_not_raise():
    # quoted mode never closes: the rest of the line is one field
    assert parse_line('a,"b,c,d') == ["a", "b,c,d"]


def test_parse_rows_skips_header():
    text = "h1,h2\n1,2\n3,4"
    assert parse_rows(text) == [["1", "2"], ["3", "4"]]


def test_parse_rows_blank_lines_yield_no_row():
    text = "h1,h2\n\n1,2\n   \n\n3,4\n"
    assert parse_rows(text) == [["1", "2"], ["3", "4"]]


def test_parse_rows_crlf_line_endings():
    text = "h1,h2\r\n1,2\r\n3,4\r\n"
    assert parse_rows(text) == [["1", "2"], ["3", "4"]]


def test_parse_rows_empty_and_header_only():
    assert parse_rows("") == []
    assert parse_rows("h1,h2") == []
    assert parse_rows("h1,h2\n") == []


def test_parse_header():
    assert parse_header('Paciente,"Data, Agenda",Status\n1,2,3') == ["Paciente", "Data, Agenda", "Status"]
    assert parse_header("") == []
