"""Unit tests for line normalization."""

import pytest

from quire.contexts.intake.normalizer import (
    RawLine,
    normalize_line,
    split_lines,
    to_raw_lines,
)


@pytest.mark.unit
def test_nbsp_becomes_space():
    assert normalize_line("John\u00a0Smith") == "John Smith"


@pytest.mark.unit
@pytest.mark.parametrize("dash", ["\u2013", "\u2014"])
def test_dashes_unified_to_en_dash(dash):
    assert normalize_line(f"Jan 2020 {dash} Mar 2023") == "Jan 2020 \u2013 Mar 2023"


@pytest.mark.unit
def test_surrounding_whitespace_trimmed():
    assert normalize_line("  \t EXPERIENCE \u00a0 ") == "EXPERIENCE"


@pytest.mark.unit
def test_whitespace_only_line_is_blank():
    line = RawLine(index=0, text=normalize_line(" \u00a0\t "))
    assert line.is_blank


@pytest.mark.unit
def test_split_lines_handles_crlf_and_cr():
    assert split_lines("a\r\nb\rc\nd") == ["a", "b", "c", "d"]


@pytest.mark.unit
def test_empty_text_is_one_blank_line():
    lines = to_raw_lines("")
    assert lines == [RawLine(index=0, text="")]


@pytest.mark.unit
def test_to_raw_lines_keeps_indices_and_blank_lines():
    lines = to_raw_lines("JOHN SMITH\n\n  EXPERIENCE  ")

    assert [line.index for line in lines] == [0, 1, 2]
    assert [line.text for line in lines] == ["JOHN SMITH", "", "EXPERIENCE"]
    assert [line.is_blank for line in lines] == [False, True, False]
