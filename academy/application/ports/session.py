"""
Session 포트 — 로그인 상태 저장소 추상화 (Django 미사용)

구현체는 교체 가능해야 한다 (Django session / Redis / signed cookie).
비즈니스 로직은 이 포트만 안다.
"""
from __future__ import annotations

from abc import abstractmethod
from typing import Any, Optional, Protocol


class MemberSessionStore(Protocol):
    """요청 1건에 묶인 세션 저장소."""

    @abstractmethod
    def load_member(self) -> Optional[dict[str, Any]]:
        """저장된 회원 식별 정보. 없으면 None."""
        ...

    @abstractmethod
    def save_member(self, identity: dict[str, Any]) -> None:
        """로그인 확정. 세션 키 재발급은 구현체 책임."""
        ...

    @abstractmethod
    def clear_member(self) -> None:
        """로그아웃 (멱등)."""
        ...

    @abstractmethod
    def is_admin(self) -> bool:
        ...

    @abstractmethod
    def set_admin(self, flag: bool) -> None:
        ...
