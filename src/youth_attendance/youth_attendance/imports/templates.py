from __future__ import annotations

import io
from typing import Sequence

import pandas as pd
from openpyxl.utils import get_column_letter

from ..core.constants import (
    ATTENDANCE_HEADERS,
    ATTENDANCE_SHEET_NAME,
    ATTENDANCE_TEMPLATE_FILENAME,
    MEMBER_HEADERS,
    MEMBER_SHEET_NAME,
    MEMBER_TEMPLATE_FILENAME,
)

XLSX_MIMETYPE = "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"


def _build_workbook(
    *,
    headers: Sequence[str],
    examples: Sequence[Sequence[str]],
    widths: Sequence[int],
    sheet_name: str,
) -> bytes:
    df = pd.DataFrame([list(r) for r in examples], columns=list(headers))
    out = io.BytesIO()
    with pd.ExcelWriter(out, engine="openpyxl") as writer:
        df.to_excel(writer, sheet_name=sheet_name, index=False)
        ws = writer.sheets[sheet_name]
        for i, width in enumerate(widths, start=1):
            ws.column_dimensions[get_column_letter(i)].width = width
    return out.getvalue()


def attendance_template() -> tuple[bytes, str]:
    """출석 이력 일괄 업로드용 양식 (날짜, 이름)."""
    data = _build_workbook(
        headers=ATTENDANCE_HEADERS,
        examples=[["2025-01-05", "홍길동"], ["2025-01-12", "김영희"]],
        widths=[12, 14],
        sheet_name=ATTENDANCE_SHEET_NAME,
    )
    return data, ATTENDANCE_TEMPLATE_FILENAME


def member_template() -> tuple[bytes, str]:
    """청년 명단 일괄 등록용 양식 (이름, 전화번호, 생년월일, 새가족, 비고)."""
    data = _build_workbook(
        headers=MEMBER_HEADERS,
        examples=[
            ["홍길동", "010-1234-5678", "1995-01-15", "Y", ""],
            ["김영희", "010-1111-2222", "1998-06-01", "N", ""],
        ],
        widths=[10, 18, 12, 8, 15],
        sheet_name=MEMBER_SHEET_NAME,
    )
    return data, MEMBER_TEMPLATE_FILENAME
