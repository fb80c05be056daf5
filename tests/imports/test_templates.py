from __future__ import annotations

import io

from openpyxl import load_workbook

from src.youth_attendance.youth_attendance.imports.decoder import read_first_sheet
from src.youth_attendance.youth_attendance.imports.normalizer import parse_attendance_rows, parse_member_rows
from src.youth_attendance.youth_attendance.imports.templates import attendance_template, member_template


def test_attendance_template_layout():
    data, filename = attendance_template()
    assert filename.endswith(".xlsx")

    ws = load_workbook(io.BytesIO(data)).worksheets[0]
    assert ws.title == "출석이력"
    assert [c.value for c in ws[1]] == ["날짜", "이름"]
    assert ws.column_dimensions["A"].width == 12
    assert ws.column_dimensions["B"].width == 14


def test_attendance_template_parses_to_its_two_examples():
    data, _ = attendance_template()
    result = parse_attendance_rows(read_first_sheet(data))

    assert result.errors == []
    assert [(r.date, r.name) for r in result.records] == [("2025-01-05", "홍길동"), ("2025-01-12", "김영희")]


def test_member_template_parses_to_its_two_examples():
    data, filename = member_template()
    sheet = read_first_sheet(data)
    result = parse_member_rows(sheet)

    assert filename.endswith(".xlsx")
    assert sheet.sheet_name == "청년명단"
    assert sheet.columns == ["이름", "전화번호", "생년월일", "새가족", "비고"]
    assert result.errors == []
    assert [(r.name, r.phone, r.birth_date, r.is_new_member, r.memo) for r in result.records] == [
        ("홍길동", "010-1234-5678", "1995-01-15", True, None),
        ("김영희", "010-1111-2222", "1998-06-01", False, None),
    ]
