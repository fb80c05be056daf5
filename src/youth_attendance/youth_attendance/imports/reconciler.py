from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable, Mapping, Optional, Protocol, Sequence

from ..core.enums import OutcomeKind
from ..core.exceptions import DuplicateKeyError
from ..members.model import Member
from .normalizer import AttendanceRow, MemberRow

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ImportOutcome:
    kind: OutcomeKind
    row_number: int
    reason: Optional[str] = None


class MemberReference:
    """Read-only name → member_id snapshot, built once per import run.

    Names are trimmed. When two members share a name the first one in fetch
    order keeps the mapping.
    """

    def __init__(self, mapping: Mapping[str, int]):
        self._by_name = dict(mapping)

    @classmethod
    def build(cls, members: Iterable[Member]) -> "MemberReference":
        mapping: dict[str, int] = {}
        for m in members:
            name = (m.name or "").strip()
            if name and name not in mapping:
                mapping[name] = m.member_id
        return cls(mapping)

    def resolve(self, name: str) -> Optional[int]:
        return self._by_name.get(name.strip())

    def __len__(self) -> int:
        return len(self._by_name)


class AttendanceInserter(Protocol):
    def insert(self, *, member_id: int, date: str) -> int:
        raise NotImplementedError


class MemberInserter(Protocol):
    def create(
        self,
        *,
        name: str,
        phone: str,
        birth_date: Optional[str],
        is_new_member: bool,
        memo: Optional[str],
    ) -> int:
        raise NotImplementedError


def reconcile_attendance(
    rows: Sequence[AttendanceRow],
    reference: MemberReference,
    attendance: AttendanceInserter,
) -> list[ImportOutcome]:
    """Insert attendance rows one at a time, in input order.

    Unknown names are not inserted. A unique-key rejection means the
    (member, date) pair is already recorded. Any other store failure is
    classified FAILED and does not stop the run.
    """
    outcomes: list[ImportOutcome] = []
    for row in rows:
        member_id = reference.resolve(row.name)
        if member_id is None:
            outcomes.append(ImportOutcome(OutcomeKind.UNRESOLVED_REFERENCE, row.row_number))
            continue
        try:
            attendance.insert(member_id=member_id, date=row.date)
        except DuplicateKeyError:
            outcomes.append(ImportOutcome(OutcomeKind.DUPLICATE_SKIPPED, row.row_number))
        except Exception as e:
            logger.warning("attendance insert failed row=%s name=%s date=%s: %s", row.row_number, row.name, row.date, e)
            outcomes.append(
                ImportOutcome(
                    OutcomeKind.FAILED,
                    row.row_number,
                    reason=f"{row.row_number}행: {row.name} {row.date} 출석 반영 실패 - {e}",
                )
            )
        else:
            outcomes.append(ImportOutcome(OutcomeKind.INSERTED, row.row_number))
    return outcomes


def reconcile_members(rows: Sequence[MemberRow], members: MemberInserter) -> list[ImportOutcome]:
    """Insert roster rows one at a time; every rejected row carries an error line."""
    outcomes: list[ImportOutcome] = []
    for row in rows:
        who = f"{row.row_number}행: {row.name}({row.phone}):"
        try:
            members.create(
                name=row.name,
                phone=row.phone,
                birth_date=row.birth_date,
                is_new_member=row.is_new_member,
                memo=row.memo,
            )
        except DuplicateKeyError:
            outcomes.append(
                ImportOutcome(OutcomeKind.FAILED, row.row_number, reason=f"{who} 이미 등록된 전화번호입니다.")
            )
        except Exception as e:
            logger.warning("member insert failed row=%s name=%s: %s", row.row_number, row.name, e)
            outcomes.append(ImportOutcome(OutcomeKind.FAILED, row.row_number, reason=f"{who} {e}"))
        else:
            outcomes.append(ImportOutcome(OutcomeKind.INSERTED, row.row_number))
    return outcomes
