from __future__ import annotations

from typing import Optional, Sequence

from ..common.validators import optional_iso_date, optional_text
from ..core.exceptions import DuplicateKeyError, ValidationError
from .model import Member
from .repository import MemberRepository


class MemberService:
    """Use case: manage the member roster (청년 명단)."""

    def __init__(self, members: MemberRepository):
        self._members = members

    def list_members(self) -> Sequence[Member]:
        return self._members.list_all()

    def get_member(self, member_id: int) -> Member:
        member = self._members.get_by_id(member_id)
        if not member:
            raise ValidationError("존재하지 않는 청년입니다.")
        return member

    def _clean(
        self,
        *,
        name: str,
        phone: str,
        birth_date: Optional[str],
        memo: Optional[str],
    ) -> dict:
        name = (name or "").strip()
        phone = (phone or "").strip()
        if not name or not phone:
            raise ValidationError("이름과 전화번호는 필수입니다.")
        return {
            "name": name,
            "phone": phone,
            "birth_date": optional_iso_date(birth_date, "생년월일"),
            "memo": optional_text(memo),
        }

    def create_member(
        self,
        *,
        name: str,
        phone: str,
        birth_date: Optional[str] = None,
        is_new_member: bool = True,
        memo: Optional[str] = None,
    ) -> int:
        fields = self._clean(name=name, phone=phone, birth_date=birth_date, memo=memo)
        try:
            return self._members.create(is_new_member=bool(is_new_member), **fields)
        except DuplicateKeyError:
            raise ValidationError("이미 등록된 전화번호입니다.")

    def update_member(
        self,
        member_id: int,
        *,
        name: str,
        phone: str,
        birth_date: Optional[str] = None,
        is_new_member: bool = True,
        memo: Optional[str] = None,
    ) -> None:
        fields = self._clean(name=name, phone=phone, birth_date=birth_date, memo=memo)
        # UPDATE rowcount is 0 when nothing changed; existence is checked separately.
        self.get_member(member_id)
        try:
            self._members.update(int(member_id), is_new_member=bool(is_new_member), **fields)
        except DuplicateKeyError:
            raise ValidationError("이미 등록된 전화번호입니다.")

    def delete_member(self, member_id: int) -> None:
        if not self._members.delete(int(member_id)):
            raise ValidationError("존재하지 않는 청년입니다.")
