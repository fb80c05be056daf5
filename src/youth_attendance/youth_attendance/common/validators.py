from __future__ import annotations

from typing import Optional

from ..core.exceptions import ValidationError
from .datetime_utils import parse_iso_date


def require_non_empty(value: str, field_name: str) -> str:
    if not value or not value.strip():
        raise ValidationError(f"{field_name}이(가) 비어 있습니다.")
    return value.strip()


def require_min_length(value: str, field_name: str, min_len: int) -> str:
    if value is None or len(value) < min_len:
        raise ValidationError(f"{field_name}은(는) {min_len}자 이상이어야 합니다.")
    return value


def optional_iso_date(value: Optional[str], field_name: str) -> Optional[str]:
    """Empty → None; otherwise must be YYYY-MM-DD."""
    if value is None or not value.strip():
        return None
    try:
        return parse_iso_date(value.strip()).isoformat()
    except ValueError:
        raise ValidationError(f"{field_name} 형식이 잘못되었습니다. (YYYY-MM-DD)")


def optional_text(value: Optional[str]) -> Optional[str]:
    if value is None:
        return None
    value = value.strip()
    return value or None
