# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

from datetime import datetime
from unittest.mock import Mock

import pytest

from schedview_lib.core.common import (
    CFG,
    decode_text,
    format_datetime,
    get_panel_width,
    parse_bool,
    parse_datetime,
    parse_tags,
    truncate_text,
)


@pytest.mark.parametrize(
    "text",
    ["", "a", "backup finished", "x" * 25, "ěščřžýáíéůú" * 2],
)
def test_truncate_text_short_text_unchanged(text):
    assert truncate_text(text) == text


def test_truncate_text_ascii():
    text = "abcdefghijklmnopqrstuvwxyzabcd"
    assert len(text) == 30

    result = truncate_text(text)

    assert result == "abcdefghijklmnopqrstuvwxy"
    assert len(result) == 25


def test_truncate_text_multibyte_characters_not_split():
    # each character takes three bytes in UTF-8
    text = "日" * 30

    result = truncate_text(text)

    assert result == "日" * 25
    assert len(result) == 25
    assert result.encode("utf-8").decode("utf-8") == result


def test_truncate_text_mixed_characters():
    text = "výstup: 🚀 úloha dokončena bez chyby"

    result = truncate_text(text)

    assert len(result) == 25
    assert text.startswith(result)


def test_truncate_text_custom_length():
    assert truncate_text("scheduled", 5) == "sched"


def test_truncate_text_uses_configured_length(monkeypatch):
    monkeypatch.setattr(CFG.dashboard, "truncate_length", 3)

    assert truncate_text("scheduled") == "sch"


def test_truncate_text_bytes_are_decoded():
    text = "ž" * 30

    result = truncate_text(text.encode("utf-8"))

    assert result == "ž" * 25


def test_truncate_text_none_returns_empty_string():
    assert truncate_text(None) == ""


def test_decode_text_invalid_bytes_replaced():
    result = decode_text(b"ok \xff\xfe")

    assert result.startswith("ok ")
    assert "�" in result


def test_decode_text_passes_strings_through():
    assert decode_text("output") == "output"


def test_decode_text_stringifies_other_values():
    assert decode_text(42) == "42"


def test_format_datetime():
    assert format_datetime(datetime(2025, 3, 1, 8, 30, 5)) == "2025-03-01 08:30:05"


def test_format_datetime_none():
    assert format_datetime(None) == ""


@pytest.mark.parametrize(
    "value,expected",
    [
        (None, None),
        (datetime(2025, 3, 1, 8, 30), datetime(2025, 3, 1, 8, 30)),
        ("2025-03-01 08:30:05", datetime(2025, 3, 1, 8, 30, 5)),
        ("2025-03-01T08:30:05", datetime(2025, 3, 1, 8, 30, 5)),
    ],
)
def test_parse_datetime(value, expected):
    assert parse_datetime(value) == expected


@pytest.mark.parametrize("value", ["yesterday", 42])
def test_parse_datetime_invalid_raises(value):
    with pytest.raises(ValueError):
        parse_datetime(value)


@pytest.mark.parametrize(
    "value,expected",
    [
        (True, True),
        (False, False),
        ("true", True),
        ("false", False),
        (" False ", False),
        ("TRUE", True),
    ],
)
def test_parse_bool(value, expected):
    assert parse_bool(value) is expected


@pytest.mark.parametrize("value", ["no", "0", "", 1, 0, None, ["true"]])
def test_parse_bool_invalid_raises(value):
    with pytest.raises(ValueError, match="Invalid boolean"):
        parse_bool(value)


def test_parse_tags():
    assert parse_tags({"role": "db", "dc": 1}) == {"role": "db", "dc": "1"}


def test_parse_tags_none_is_empty():
    assert parse_tags(None) == {}


@pytest.mark.parametrize("value", [["a", "b"], "role=db", 3])
def test_parse_tags_not_a_mapping_raises(value):
    with pytest.raises(TypeError, match="expected a mapping"):
        parse_tags(value)


@pytest.mark.parametrize(
    "term_width,factor,min_width,max_width,expected",
    [
        (120, 1, None, None, 120),
        (120, 3, None, None, 40),
        (120, 3, 60, None, 60),
        (120, 1, 80, 100, 100),
        (50, 1, 80, None, 80),
    ],
)
def test_get_panel_width(term_width, factor, min_width, max_width, expected):
    console = Mock()
    console.size.width = term_width

    assert get_panel_width(console, factor, min_width, max_width) == expected
