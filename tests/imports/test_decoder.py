from __future__ import annotations

import io

import pandas as pd
import pytest

from src.youth_attendance.youth_attendance.core.exceptions import DecodeError
from src.youth_attendance.youth_attendance.imports.decoder import check_extension, read_first_sheet
from tests.fakes import xlsx_bytes


@pytest.mark.parametrize("filename", ["a.xlsx", "B.XLS", "출석.2025.xlsx"])
def test_spreadsheet_extensions_are_accepted(filename):
    assert check_extension(filename) in {"xlsx", "xls"}


@pytest.mark.parametrize("filename", ["a.csv", "a", "", None, "xlsx"])
def test_other_extensions_are_rejected(filename):
    with pytest.raises(DecodeError) as exc:
        check_extension(filename)
    assert str(exc.value) == "엑셀 파일(.xlsx, .xls)만 업로드 가능합니다."


def test_non_spreadsheet_bytes_raise_decode_error():
    with pytest.raises(DecodeError):
        read_first_sheet(b"this is not a workbook")


def test_header_is_row_one_and_data_starts_at_two():
    data = xlsx_bytes([["2025-01-05", "홍길동"], ["2025-01-12", "김영희"]], [" 날짜 ", "이름"])

    sheet = read_first_sheet(io.BytesIO(data))

    assert sheet.columns == ["날짜", "이름"]
    assert [r.row_number for r in sheet.rows] == [2, 3]
    assert sheet.rows[0].get("이름") == "홍길동"


def test_blank_lines_are_dropped_but_numbering_follows_the_sheet():
    data = xlsx_bytes([["2025-01-05", "홍길동"], [None, None], ["2025-01-12", "김영희"]], ["날짜", "이름"])

    sheet = read_first_sheet(data)

    assert [r.row_number for r in sheet.rows] == [2, 4]


def test_na_like_text_is_kept_as_text():
    data = xlsx_bytes([["NA", "010-1", None, "N/A", "null"]], ["이름", "전화번호", "생년월일", "새가족", "비고"])

    row = read_first_sheet(data).rows[0]

    assert row.get("이름") == "NA"
    assert row.get("새가족") == "N/A"
    assert row.get("비고") == "null"
    assert row.get("생년월일") is None


def test_only_first_sheet_is_read():
    out = io.BytesIO()
    with pd.ExcelWriter(out, engine="openpyxl") as writer:
        pd.DataFrame([["a", "1"]], columns=["이름", "전화번호"]).to_excel(writer, sheet_name="first", index=False)
        pd.DataFrame([["b", "2"]], columns=["이름", "전화번호"]).to_excel(writer, sheet_name="second", index=False)

    sheet = read_first_sheet(out.getvalue())

    assert sheet.sheet_name == "first"
    assert [r.get("이름") for r in sheet.rows] == ["a"]
