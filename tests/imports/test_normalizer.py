from __future__ import annotations

from datetime import date, datetime

import pandas as pd
import pytest

from src.youth_attendance.youth_attendance.core.exceptions import RowValidationError
from src.youth_attendance.youth_attendance.imports.decoder import RawRow, SheetData
from src.youth_attendance.youth_attendance.imports.normalizer import (
    normalize_attendance_row,
    normalize_date,
    normalize_member_row,
    normalize_new_member,
    normalize_phone,
    parse_attendance_rows,
)


@pytest.mark.parametrize(
    "value, expected",
    [
        (45658, "2025-01-01"),
        (45662, "2025-01-05"),
        (45662.75, "2025-01-05"),
        (25569, "1970-01-01"),
        (datetime(2025, 1, 5, 9, 30), "2025-01-05"),
        (pd.Timestamp("2025-01-05 00:00:00"), "2025-01-05"),
        (date(2025, 1, 5), "2025-01-05"),
        ("2025-01-05", "2025-01-05"),
        ("  2025-01-05  ", "2025-01-05"),
        ("2025/1/5", "2025-01-05"),
    ],
)
def test_normalize_date_accepts_serials_dates_and_text(value, expected):
    assert normalize_date(value) == expected


@pytest.mark.parametrize(
    "value", [None, "", "   ", "날짜아님", "today", "now", "yesterday", 0, -3, True, float("nan")]
)
def test_normalize_date_rejects_invalid_values(value):
    assert normalize_date(value) is None


def test_normalize_phone_removes_all_whitespace():
    assert normalize_phone(" 010 1234\t5678 ") == "01012345678"
    assert normalize_phone("010-1234-5678") == "010-1234-5678"
    assert normalize_phone(None) == ""


@pytest.mark.parametrize("value", ["N", "n", "0", 0, "FALSE", "false", "아니오", " N "])
def test_not_new_member_tokens(value):
    assert normalize_new_member(value) is False


@pytest.mark.parametrize("value", [None, "", "Y", "1", "예", "TRUE", "whatever"])
def test_everything_else_is_new_member(value):
    assert normalize_new_member(value) is True


def test_blank_attendance_row_is_skipped():
    assert normalize_attendance_row(RawRow(5, {"날짜": None, "이름": "  "})) is None


def test_attendance_row_with_bad_date_reports_row_number():
    with pytest.raises(RowValidationError) as exc:
        normalize_attendance_row(RawRow(3, {"날짜": "2025-13-45", "이름": "홍길동"}))
    assert str(exc.value).startswith("3행: 날짜")


def test_attendance_row_without_name_reports_row_number():
    with pytest.raises(RowValidationError) as exc:
        normalize_attendance_row(RawRow(4, {"날짜": 45662, "이름": None}))
    assert str(exc.value) == "4행: 이름이 비어 있습니다."


def test_attendance_row_trims_name():
    row = normalize_attendance_row(RawRow(2, {"날짜": "2025-01-05", "이름": "  홍길동 "}))
    assert row.name == "홍길동"
    assert row.date == "2025-01-05"
    assert row.row_number == 2


def test_member_row_defaults_and_optional_fields():
    row = normalize_member_row(
        RawRow(2, {"이름": "홍길동", "전화번호": "010 1234 5678", "생년월일": "잘못된값", "새가족": None, "비고": "  "})
    )
    assert row.phone == "01012345678"
    assert row.birth_date is None
    assert row.is_new_member is True
    assert row.memo is None


def test_member_row_without_phone_is_an_error():
    with pytest.raises(RowValidationError) as exc:
        normalize_member_row(RawRow(7, {"이름": "홍길동", "전화번호": None}))
    assert str(exc.value) == "7행: 전화번호가 비어 있습니다."


def test_parse_rows_keeps_order_and_collects_errors():
    sheet = SheetData(
        sheet_name="출석이력",
        columns=["날짜", "이름"],
        rows=[
            RawRow(2, {"날짜": "2025-01-05", "이름": "홍길동"}),
            RawRow(3, {"날짜": "x", "이름": "김영희"}),
            RawRow(4, {"날짜": 45669, "이름": "이철수"}),
        ],
    )
    result = parse_attendance_rows(sheet)
    assert [r.row_number for r in result.records] == [2, 4]
    assert result.records[1].date == "2025-01-12"
    assert len(result.errors) == 1 and result.errors[0].startswith("3행:")
