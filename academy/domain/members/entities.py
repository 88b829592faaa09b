"""
회원 도메인 엔티티 — 순수 파이썬 (Django/ORM 미사용)

세션에는 MemberIdentity(공개 식별 정보)만 캐시한다.
"""
from __future__ import annotations

from dataclasses import asdict, dataclass
from enum import Enum
from typing import Any, Optional


class MemberType(str, Enum):
    """apps.domains.members.models.Member.MemberType 과 동기화."""
    STUDENT = "student"
    PARENT = "parent"


@dataclass(frozen=True)
class MemberIdentity:
    id: int
    username: str
    member_type: str
    student_name: str

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Optional[dict[str, Any]]) -> Optional["MemberIdentity"]:
        """세션 payload 복원. 깨진 값이면 None (비로그인 취급)."""
        if not isinstance(data, dict):
            return None
        try:
            return cls(
                id=int(data["id"]),
                username=str(data["username"]),
                member_type=str(data.get("member_type") or MemberType.STUDENT.value),
                student_name=str(data.get("student_name") or ""),
            )
        except (KeyError, TypeError, ValueError):
            return None
