"""Spreadsheet decoding for bulk uploads.

The first sheet of the workbook is used; its first row is the header and every
following row becomes a RawRow keyed by the (stripped) header names. Cells are
kept untyped so the normalizer can tell numeric date serials, date cells and
free text apart.
"""
from __future__ import annotations

import io
from dataclasses import dataclass, field
from typing import IO, Any, Optional, Union

import pandas as pd

from ..core.constants import ALLOWED_UPLOAD_EXTENSIONS
from ..core.exceptions import DecodeError

Source = Union[str, bytes, IO[bytes]]


@dataclass(frozen=True)
class RawRow:
    row_number: int  # 1-based spreadsheet line (header = 1)
    values: dict[str, Any] = field(default_factory=dict)

    def get(self, column: str, default: Any = None) -> Any:
        return self.values.get(column, default)


@dataclass(frozen=True)
class SheetData:
    sheet_name: str
    columns: list[str]
    rows: list[RawRow]


def check_extension(filename: Optional[str]) -> str:
    """Return the lower-cased extension or raise DecodeError for non-spreadsheets."""
    name = filename or ""
    ext = name.rsplit(".", 1)[-1].lower() if "." in name else ""
    if ext not in ALLOWED_UPLOAD_EXTENSIONS:
        raise DecodeError("엑셀 파일(.xlsx, .xls)만 업로드 가능합니다.")
    return ext


def _clean_cell(value: Any) -> Any:
    if value is None:
        return None
    if isinstance(value, float) and value != value:
        return None
    if value is pd.NaT:
        return None
    if isinstance(value, str) and not value.strip():
        return None
    return value


def read_first_sheet(source: Source) -> SheetData:
    """Read the first sheet of an .xlsx/.xls workbook.

    Raises:
        DecodeError: the workbook has no sheets or is not a spreadsheet container.
    """
    if isinstance(source, (bytes, bytearray)):
        source = io.BytesIO(source)
    try:
        with pd.ExcelFile(source) as xls:
            if not xls.sheet_names:
                raise DecodeError("시트가 없습니다.")
            sheet_name = str(xls.sheet_names[0])
            # Text such as "NA" or "N/A" stays text; only truly empty cells are blank.
            df = xls.parse(
                xls.sheet_names[0], header=0, dtype=object, keep_default_na=False, na_values=[]
            )
    except DecodeError:
        raise
    except Exception as e:
        raise DecodeError("파일을 읽을 수 없습니다.") from e

    columns = [str(c).strip() for c in df.columns]
    rows: list[RawRow] = []
    # read_excel keeps blank lines, so index + 2 is the spreadsheet row number.
    for idx, raw in enumerate(df.itertuples(index=False, name=None)):
        values = {col: _clean_cell(val) for col, val in zip(columns, raw)}
        if all(v is None for v in values.values()):
            continue
        rows.append(RawRow(row_number=idx + 2, values=values))

    return SheetData(sheet_name=sheet_name, columns=columns, rows=rows)
