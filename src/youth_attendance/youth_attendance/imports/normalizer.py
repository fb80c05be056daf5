"""Row normalization for bulk uploads.

Each entry point takes one RawRow and returns a typed record, ``None`` for a
blank row (both required cells empty), or raises RowValidationError whose
message is the user-facing error line for that row.
"""
from __future__ import annotations

import math
import numbers
import re
from dataclasses import dataclass
from datetime import date, datetime, timedelta
from typing import Any, Callable, Generic, Optional, TypeVar

import pandas as pd

from ..core.constants import EXCEL_UNIX_EPOCH_SERIAL, NOT_NEW_MEMBER_TOKENS
from ..core.exceptions import RowValidationError
from .decoder import RawRow, SheetData

_UNIX_EPOCH = date(1970, 1, 1)


@dataclass(frozen=True)
class AttendanceRow:
    row_number: int
    date: str  # YYYY-MM-DD
    name: str


@dataclass(frozen=True)
class MemberRow:
    row_number: int
    name: str
    phone: str
    birth_date: Optional[str]
    is_new_member: bool
    memo: Optional[str]


R = TypeVar("R")


@dataclass(frozen=True)
class ParseResult(Generic[R]):
    records: list[R]
    errors: list[str]


# ---------------------------------------------------------------------------
# Cell coercion
# ---------------------------------------------------------------------------

def cell_text(value: Any) -> str:
    """Render a cell as text; integral numbers lose their '.0'."""
    if value is None:
        return ""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def is_blank(value: Any) -> bool:
    return not cell_text(value).strip()


def normalize_date(value: Any) -> Optional[str]:
    """Spreadsheet serial, date cell or free-text date → YYYY-MM-DD (None if invalid)."""
    if value is None or isinstance(value, bool):
        return None

    if isinstance(value, datetime):
        return value.date().isoformat()
    if isinstance(value, date):
        return value.isoformat()

    if isinstance(value, numbers.Real):
        serial = float(value)
        if not math.isfinite(serial) or serial <= 0:
            return None
        try:
            return (_UNIX_EPOCH + timedelta(days=math.floor(serial) - EXCEL_UNIX_EPOCH_SERIAL)).isoformat()
        except OverflowError:
            return None

    text = str(value).strip()
    # Words like "today" or "now" parse as relative dates; a real date has digits.
    if not re.search(r"\d", text):
        return None
    try:
        parsed = pd.to_datetime(text)
    except (ValueError, TypeError, OverflowError):
        return None
    if parsed is pd.NaT:
        return None
    return parsed.date().isoformat()


def normalize_phone(value: Any) -> str:
    return re.sub(r"\s", "", cell_text(value).strip())


def normalize_new_member(value: Any) -> bool:
    """'N', '0', 'FALSE', '아니오' → False; anything else (including empty) → True."""
    if value is None:
        return True
    return cell_text(value).strip().upper() not in NOT_NEW_MEMBER_TOKENS


def normalize_text(value: Any) -> Optional[str]:
    text = cell_text(value).strip()
    return text or None


# ---------------------------------------------------------------------------
# Row entry points
# ---------------------------------------------------------------------------

def normalize_attendance_row(raw: RawRow) -> Optional[AttendanceRow]:
    date_cell = raw.get("날짜")
    name = cell_text(raw.get("이름")).strip()
    if is_blank(date_cell) and not name:
        return None

    iso = normalize_date(date_cell)
    if not iso:
        raise RowValidationError(f"{raw.row_number}행: 날짜가 비어 있거나 형식이 잘못되었습니다. (YYYY-MM-DD)")
    if not name:
        raise RowValidationError(f"{raw.row_number}행: 이름이 비어 있습니다.")
    return AttendanceRow(row_number=raw.row_number, date=iso, name=name)


def normalize_member_row(raw: RawRow) -> Optional[MemberRow]:
    name = cell_text(raw.get("이름")).strip()
    phone = normalize_phone(raw.get("전화번호"))
    if not name and not phone:
        return None
    if not name:
        raise RowValidationError(f"{raw.row_number}행: 이름이 비어 있습니다.")
    if not phone:
        raise RowValidationError(f"{raw.row_number}행: 전화번호가 비어 있습니다.")
    return MemberRow(
        row_number=raw.row_number,
        name=name,
        phone=phone,
        birth_date=normalize_date(raw.get("생년월일")),
        is_new_member=normalize_new_member(raw.get("새가족")),
        memo=normalize_text(raw.get("비고")),
    )


def _parse_rows(sheet: SheetData, normalize: Callable[[RawRow], Optional[R]]) -> ParseResult[R]:
    records: list[R] = []
    errors: list[str] = []
    for raw in sheet.rows:
        try:
            record = normalize(raw)
        except RowValidationError as e:
            errors.append(str(e))
            continue
        if record is not None:
            records.append(record)
    return ParseResult(records=records, errors=errors)


def parse_attendance_rows(sheet: SheetData) -> ParseResult[AttendanceRow]:
    return _parse_rows(sheet, normalize_attendance_row)


def parse_member_rows(sheet: SheetData) -> ParseResult[MemberRow]:
    return _parse_rows(sheet, normalize_member_row)
