# tests/test_classifier.py

from __future__ import annotations

import pytest

from family_chart.loader import MetadataField, RecordKind, classify_line


def test_person_line() -> None:
    rec = classify_line("(3) 5a Nguyễn Văn A (1920-1995)", lineno=7)
    assert rec.kind is RecordKind.PERSON
    assert rec.lineno == 7
    assert rec.generation == 3
    assert rec.index == "5a"
    assert rec.text == "Nguyễn Văn A (1920-1995)"


def test_person_line_without_space_after_generation() -> None:
    rec = classify_line("(12)4 Bob")
    assert rec.kind is RecordKind.PERSON
    assert rec.generation == 12
    assert rec.index == "4"
    assert rec.text == "Bob"


def test_person_line_requires_text_after_index() -> None:
    assert classify_line("(1) 1").kind is RecordKind.IGNORED


def test_uppercase_index_letter_is_not_a_person_line() -> None:
    assert classify_line("(1) 5A Ann").kind is RecordKind.IGNORED


def test_spouse_line() -> None:
    rec = classify_line("& Trần Thị B (1925-)")
    assert rec.kind is RecordKind.SPOUSE
    assert rec.text == "Trần Thị B (1925-)"


def test_ampersand_without_space_is_ignored() -> None:
    assert classify_line("&Carol").kind is RecordKind.IGNORED


@pytest.mark.parametrize(
    "line, field, value",
    [
        ("ali. Ông Hai", MetadataField.ALIAS, "Ông Hai"),
        ("TênNhà. Nhà Cả", MetadataField.HOUSE_NAME, "Nhà Cả"),
        ("TênVN. Trần Thị Lan", MetadataField.NAME_VN, "Trần Thị Lan"),
        ("NgàyKỵ. 12/3 Âm lịch", MetadataField.MEMORIAL_DATE, "12/3 Âm lịch"),
        ("PhápNm. Thích Minh Tâm", MetadataField.RELIGIOUS_NAME, "Thích Minh Tâm"),
        ("m. Jan 2011", MetadataField.MARRIAGE, "Jan 2011"),
        ("div. 2010", MetadataField.DIVORCE, "2010"),
    ],
)
def test_metadata_lines(line: str, field: MetadataField, value: str) -> None:
    rec = classify_line(line)
    assert rec.kind is RecordKind.METADATA
    assert rec.field is field
    assert rec.value == value


def test_marriage_with_empty_value() -> None:
    rec = classify_line("m.")
    assert rec.kind is RecordKind.METADATA
    assert rec.field is MetadataField.MARRIAGE
    assert rec.value == ""


def test_unrecognized_line_is_ignored() -> None:
    rec = classify_line("Page 2 of 7", lineno=3)
    assert rec.kind is RecordKind.IGNORED
    assert rec.raw == "Page 2 of 7"


@pytest.mark.parametrize("line", ["(1) ١ Ann", "(١) 1 Ann", "(1) ۲a Bea"])
def test_non_ascii_digits_do_not_make_a_person_line(line: str) -> None:
    assert classify_line(line).kind is RecordKind.IGNORED
