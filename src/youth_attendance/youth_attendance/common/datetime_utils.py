from __future__ import annotations

import calendar
from datetime import date, datetime, timedelta


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    return datetime.strptime(value, "%Y-%m-%d").date()


def today_local() -> date:
    """Current local date.

    Note: Wrapped so tests can patch/mocked easier.
    """
    return date.today()


def sundays_in_month(year: int, month: int) -> list[date]:
    """All Sundays (주일) of the given month, in order."""
    first = date(year, month, 1)
    # Monday=0 ... Sunday=6
    offset = (6 - first.weekday()) % 7
    out: list[date] = []
    d = first + timedelta(days=offset)
    while d.month == month:
        out.append(d)
        d += timedelta(days=7)
    return out


def month_bounds(year: int, month: int) -> tuple[date, date]:
    _, last_day = calendar.monthrange(year, month)
    return date(year, month, 1), date(year, month, last_day)


def parse_hhmm(value: str) -> tuple[int, int] | None:
    """Parse "HH:MM" into (hour, minute); None when malformed or out of range."""
    parts = (value or "").strip().split(":")
    if len(parts) != 2:
        return None
    try:
        hour, minute = int(parts[0]), int(parts[1])
    except ValueError:
        return None
    if not (0 <= hour <= 23 and 0 <= minute <= 59):
        return None
    return hour, minute


_KOREAN_WEEKDAYS = ("월", "화", "수", "목", "금", "토", "일")


def format_korean_date(value: date | str) -> str:
    """2025-01-05 → '2025년 1월 5일 (일)'."""
    d = parse_iso_date(value) if isinstance(value, str) else value
    return f"{d.year}년 {d.month}월 {d.day}일 ({_KOREAN_WEEKDAYS[d.weekday()]})"
