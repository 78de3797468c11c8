# tests/test_utils.py

"""
Tests for form parsing, search filtering and locale helpers.
"""

import pytest

from core.errors import PayloadError
from core.locale import Language, describe, direction, parse_language, toggle
from core.utils import filter_documents, parse_float, parse_int, safe_filename


@pytest.mark.parametrize("raw, expected", [
    ("12.5", 12.5),
    (" 80 ", 80.0),
    (3, 3.0),
    ("", None),
    ("   ", None),
    (None, None),
])
def test_parse_float(raw, expected):
    assert parse_float(raw, "area") == expected


@pytest.mark.parametrize("raw", ["abc", "12,5", "nan", "inf", "-Infinity", True])
def test_parse_float_rejects_malformed(raw):
    with pytest.raises(PayloadError) as exc:
        parse_float(raw, "rentValue")
    assert exc.value.field == "rentValue"


@pytest.mark.parametrize("raw, expected", [("3", 3), ("-1", -1), (7, 7), (4.0, 4), ("", None)])
def test_parse_int(raw, expected):
    assert parse_int(raw, "floor") == expected


@pytest.mark.parametrize("raw", ["3.5", "three", 2.5, False])
def test_parse_int_rejects_malformed(raw):
    with pytest.raises(PayloadError):
        parse_int(raw, "floor")


def test_safe_filename():
    assert safe_filename("tower a (final).glb") == "tower_a__final_.glb"


PROPERTIES = [
    {"id": "1", "name": "Tower A", "city": "Cairo"},
    {"id": "2", "name": "Marina Heights", "city": "Dubai"},
    {"id": "3", "name": None, "city": "Giza"},
]


def test_search_matches_any_field_case_insensitively():
    assert [p["id"] for p in filter_documents(PROPERTIES, ("name", "city"), "tower")] == ["1"]
    assert [p["id"] for p in filter_documents(PROPERTIES, ("name", "city"), "CAIRO")] == ["1"]
    assert filter_documents(PROPERTIES, ("name", "city"), "villa") == []


def test_empty_search_returns_everything():
    assert filter_documents(PROPERTIES, ("name", "city"), "") == PROPERTIES


def test_search_is_idempotent():
    once = filter_documents(PROPERTIES, ("name", "city"), "a")
    twice = filter_documents(once, ("name", "city"), "a")
    assert once == twice


def test_locale_helpers():
    assert toggle(Language.en) is Language.ar
    assert toggle(Language.ar) is Language.en
    assert direction(Language.ar) == "rtl"
    assert describe(Language.en) == {"language": "en", "dir": "ltr"}
    assert parse_language("fr") is Language.en
