# tests/test_extraction.py

from __future__ import annotations

from family_chart.loader import extract_name, normalize_name_key, parse_years


def test_full_range():
    years = parse_years("Ann (1920-1995)")
    assert years.birth_year == 1920
    assert years.death_year == 1995


def test_approximate_open_range():
    years = parse_years("Ann (ca1920-)")
    assert years.birth_year == 1920
    assert years.death_year is None


def test_less_and_greater_markers():
    years = parse_years("Ann (<1900->1950)")
    assert years.birth_year == 1900
    assert years.death_year == 1950


def test_approximate_death_year():
    years = parse_years("Ann (1880-ca1945)")
    assert years.birth_year == 1880
    assert years.death_year == 1945

    years = parse_years("Ann (ca1880-ca1945)")
    assert years.birth_year == 1880
    assert years.death_year == 1945


def test_non_ascii_digits_are_not_years():
    years = parse_years("Ann (١٩٢٠-١٩٩٥)")
    assert years.birth_year is None
    assert years.death_year is None


def test_death_only():
    years = parse_years("Ann (-1980)")
    assert years.birth_year is None
    assert years.death_year == 1980


def test_empty_parentheses_and_no_range():
    assert parse_years("Ann ()").birth_year is None
    assert parse_years("Ann ()").death_year is None
    assert parse_years("Ann").birth_year is None
    assert parse_years("Ann").death_year is None


def test_extract_name_removes_every_parenthetical():
    assert extract_name("Nguyễn Văn A (1920-1995) (adopted)") == "Nguyễn Văn A"


def test_extract_name_removes_localized_annotation():
    assert extract_name("Mary Smith née Jones") == "Mary Smith"
    assert extract_name("Lan VN Lành (1950-)") == "Lan"


def test_marker_inside_a_word_is_kept():
    assert extract_name("René Dupont") == "René Dupont"
    assert extract_name("Renée Dupont née Martin") == "Renée Dupont"
    assert extract_name("Ivne Tran") == "Ivne Tran"


def test_extract_name_is_idempotent():
    for text in ("René Dupont (1900-)", "Mary Smith née Jones", "Lan VN Lành"):
        once = extract_name(text)
        assert extract_name(once) == once


def test_extract_name_without_markup_is_unchanged():
    assert extract_name("  Bob  Smith ") == "Bob  Smith"


def test_normalize_name_key_ignores_case_and_spacing():
    assert normalize_name_key("Nguyễn  Văn A") == normalize_name_key("nguyễn văn a")
    assert normalize_name_key("Ann") != normalize_name_key("Anne")
