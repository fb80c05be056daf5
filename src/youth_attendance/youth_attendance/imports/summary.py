from __future__ import annotations

from collections import Counter
from dataclasses import dataclass
from typing import Iterable, Optional, Sequence

from ..core.constants import ATTENDANCE_ERROR_CAP, MEMBER_ERROR_CAP
from ..core.enums import ImportFlow, OutcomeKind
from .reconciler import ImportOutcome


@dataclass(frozen=True)
class ImportSummary:
    """Aggregated result of one upload, ready for display.

    errors holds normalization errors first (in row order), then store errors
    from reconciliation. Only the first ``error_cap`` are displayed.
    """

    flow: ImportFlow
    inserted: int
    duplicate_skipped: int
    unresolved: int
    failed: int
    errors: tuple[str, ...]
    parse_error_count: int
    error_cap: int

    @property
    def total(self) -> int:
        return self.inserted + self.duplicate_skipped + self.unresolved + self.failed

    @property
    def displayed_errors(self) -> list[str]:
        return list(self.errors[: self.error_cap])

    @property
    def hidden_error_count(self) -> int:
        return max(0, len(self.errors) - self.error_cap)

    @property
    def more_errors_label(self) -> Optional[str]:
        n = self.hidden_error_count
        return f"외 {n}건" if n else None

    @property
    def status_line(self) -> str:
        if self.flow == ImportFlow.ATTENDANCE:
            parts = [
                f"반영: {self.inserted}건",
                f"이미 있음 제외: {self.duplicate_skipped}건",
                f"명단에 없음: {self.unresolved}건",
            ]
            if self.failed:
                parts.append(f"실패: {self.failed}건")
        else:
            parts = [f"등록: {self.inserted}건"]
            if self.failed:
                parts.append(f"실패: {self.failed}건")
        if self.parse_error_count:
            parts.append(f"파싱 경고 {self.parse_error_count}건")
        return ", ".join(parts)


def summarize(
    outcomes: Iterable[ImportOutcome],
    parse_errors: Sequence[str],
    *,
    flow: ImportFlow,
    error_cap: Optional[int] = None,
) -> ImportSummary:
    if error_cap is None:
        error_cap = ATTENDANCE_ERROR_CAP if flow == ImportFlow.ATTENDANCE else MEMBER_ERROR_CAP

    outcomes = list(outcomes)
    counts = Counter(o.kind for o in outcomes)
    store_errors = [o.reason for o in outcomes if o.kind != OutcomeKind.INSERTED and o.reason]

    return ImportSummary(
        flow=flow,
        inserted=counts[OutcomeKind.INSERTED],
        duplicate_skipped=counts[OutcomeKind.DUPLICATE_SKIPPED],
        unresolved=counts[OutcomeKind.UNRESOLVED_REFERENCE],
        failed=counts[OutcomeKind.FAILED],
        errors=tuple(parse_errors) + tuple(store_errors),
        parse_error_count=len(parse_errors),
        error_cap=int(error_cap),
    )
