"""Tests for literal / regex unit search."""

import pytest

from lite_bundle.bundle.search import search_units
from lite_bundle.core.models import Snapshot
from lite_bundle.errors import InvalidPattern

from conftest import make_snapshot


@pytest.fixture
def snapshot():
    return make_snapshot({"1": "const a='apple';", "2": "const b='banana';"})


def test_literal_search(snapshot):
    assert search_units(snapshot, "apple") == [{"id": "1", "path": "./1.js"}]
    assert search_units(snapshot, "banana") == [{"id": "2", "path": "./2.js"}]


def test_literal_search_is_case_sensitive(snapshot):
    assert search_units(snapshot, "APPLE") == []


def test_regex_search_is_case_insensitive(snapshot):
    ids = [r["id"] for r in search_units(snapshot, "B[A-Z]+NA", is_regex=True)]
    assert ids == ["2"]


def test_regex_matches_anywhere(snapshot):
    ids = [r["id"] for r in search_units(snapshot, r"const \w+=", is_regex=True)]
    assert ids == ["1", "2"]


def test_invalid_regex_fails_before_scanning():
    with pytest.raises(InvalidPattern, match=r"Invalid regular expression: \(unclosed"):
        search_units(Snapshot([]), "(unclosed", is_regex=True)


def test_invalid_regex_is_literal_when_not_regex(snapshot):
    assert search_units(snapshot, "(unclosed") == []


def test_limit_truncates_in_order():
    snapshot = make_snapshot({"1": "match", "2": "match", "3": "match"})
    assert [r["id"] for r in search_units(snapshot, "match", limit=2)] == ["1", "2"]
    assert search_units(snapshot, "match", limit=0) == []
