from __future__ import annotations

import logging
from typing import Optional

from ..attendance.repository import AttendanceRepository
from ..core.enums import ImportFlow
from ..core.exceptions import ImportAbortedError
from ..members.repository import MemberRepository
from .decoder import Source, check_extension, read_first_sheet
from .normalizer import parse_attendance_rows, parse_member_rows
from .reconciler import MemberReference, reconcile_attendance, reconcile_members
from .summary import ImportSummary, summarize

logger = logging.getLogger(__name__)


class BulkImportService:
    """Use case: bulk upload of attendance history / member roster from a spreadsheet.

    decode → normalize → (reference snapshot) → sequential inserts → summary.
    Only an unreadable file or a file with no usable rows aborts the run; every
    other problem is reported per row in the returned ImportSummary.
    """

    def __init__(self, attendance: AttendanceRepository, members: MemberRepository):
        self._attendance = attendance
        self._members = members

    def import_attendance(self, source: Source, filename: Optional[str]) -> ImportSummary:
        check_extension(filename)
        sheet = read_first_sheet(source)
        parsed = parse_attendance_rows(sheet)
        if not parsed.records and not parsed.errors:
            raise ImportAbortedError("유효한 출석 행이 없습니다. 양식을 확인해 주세요.")

        reference = MemberReference.build(self._members.list_all())
        outcomes = reconcile_attendance(parsed.records, reference, self._attendance)
        summary = summarize(outcomes, parsed.errors, flow=ImportFlow.ATTENDANCE)
        logger.info("attendance import file=%s rows=%s: %s", filename, len(parsed.records), summary.status_line)
        return summary

    def import_members(self, source: Source, filename: Optional[str]) -> ImportSummary:
        check_extension(filename)
        sheet = read_first_sheet(source)
        parsed = parse_member_rows(sheet)
        if not parsed.records and not parsed.errors:
            raise ImportAbortedError("유효한 청년 행이 없습니다. 양식을 확인해 주세요.")

        outcomes = reconcile_members(parsed.records, self._members)
        summary = summarize(outcomes, parsed.errors, flow=ImportFlow.MEMBERS)
        logger.info("member import file=%s rows=%s: %s", filename, len(parsed.records), summary.status_line)
        return summary
