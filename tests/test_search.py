# tests/test_search.py

from __future__ import annotations

import re

from family_chart import parse_family_tree
from family_chart.search import _regex_search, compile_query_regex, search_persons, similarity


CHART = "\n".join(
    [
        "(1) 1 Nguyễn Văn Giao",
        "TênNhà. Nhà Cả",
        "& Lan",
        "(2) 1 Nguyễn Văn Bảo",
        "ali. Ông Hai",
        "(2) 2 Trần Thị Cúc",
        "TênVN. Cuc Tran",
    ]
)


def test_short_query_returns_nothing() -> None:
    data = parse_family_tree(CHART)
    assert search_persons(data, "N") == []


def test_substring_match_on_name() -> None:
    data = parse_family_tree(CHART)
    results = search_persons(data, "bảo")
    assert [r.person.name for r in results] == ["Nguyễn Văn Bảo"]
    assert results[0].score == 1.0
    assert results[0].field == "name"


def test_alias_and_house_name_are_indexed() -> None:
    data = parse_family_tree(CHART)
    assert search_persons(data, "Ông Hai")[0].field == "alias"
    assert search_persons(data, "Nhà Cả")[0].person.name == "Nguyễn Văn Giao"


def test_fuzzy_match_tolerates_typos() -> None:
    data = parse_family_tree(CHART)
    results = search_persons(data, "Cuc Trann")
    assert results
    assert results[0].person.name == "Trần Thị Cúc"


def test_unrelated_query_has_no_hits() -> None:
    data = parse_family_tree(CHART)
    assert search_persons(data, "zzzzqq") == []


def test_limit_is_respected() -> None:
    data = parse_family_tree(CHART)
    assert len(search_persons(data, "Nguyễn", limit=1)) == 1


def test_regex_mode() -> None:
    data = parse_family_tree(CHART)
    names = {r.person.name for r in search_persons(data, "/^nguyễn/i")}
    assert names == {"Nguyễn Văn Giao", "Nguyễn Văn Bảo"}

    # Without a closing slash the pattern defaults to case-insensitive.
    assert len(search_persons(data, "/^nguyễn")) == 2

    # Explicit flags without "i" make the pattern case-sensitive.
    assert search_persons(data, "/^nguyễn/") == []
    assert len(search_persons(data, "/^Nguyễn/")) == 2


def test_invalid_regex_returns_empty() -> None:
    data = parse_family_tree(CHART)
    assert compile_query_regex("/([/") is None
    assert search_persons(data, "/([/") == []


def test_similarity_bounds() -> None:
    assert similarity("ann", "Ann Smith") == 1.0
    assert 0.0 <= similarity("xyz", "Ann") < 0.5
    assert similarity("", "Ann") == 0.0


def test_zero_limit_returns_nothing_in_either_mode() -> None:
    data = parse_family_tree(CHART)
    assert search_persons(data, "/Nguyễn/", limit=0) == []
    assert search_persons(data, "Nguyễn", limit=0) == []
    assert len(search_persons(data, "/Nguyễn/", limit=1)) == 1


def test_regex_limit_counts_matches_only() -> None:
    data = parse_family_tree(CHART)
    assert len(search_persons(data, "/^Nguyễn/", limit=2)) == 2


def test_unknown_or_repeated_regex_flags_return_empty() -> None:
    data = parse_family_tree(CHART)
    assert compile_query_regex("/^Nguyễn/q") is None
    assert search_persons(data, "/^Nguyễn/q") == []
    assert search_persons(data, "/^nguyễn/ii") == []


def test_compatibility_flags_are_accepted() -> None:
    data = parse_family_tree(CHART)
    assert len(search_persons(data, "/^nguyễn/gi")) == 2
    assert len(search_persons(data, "/^Nguyễn/u")) == 2


def test_regex_scan_checks_limit_before_collecting() -> None:
    persons = parse_family_tree(CHART).persons()
    assert _regex_search(persons, re.compile("Nguyễn"), 0) == []
    assert len(_regex_search(persons, re.compile("Nguyễn"), 1)) == 1
