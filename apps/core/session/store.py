# ======================================================================
# PATH: apps/core/session/store.py
# ======================================================================
from __future__ import annotations

from typing import Any, Optional

SESSION_MEMBER_KEY = "member"
SESSION_ADMIN_KEY = "is_admin"


class DjangoSessionMemberStore:
    """
    MemberSessionStore 구현 — request.session 기반.

    저장 위치는 settings.SESSION_ENGINE 이 결정한다 (db / cache / signed_cookies).
    """

    def __init__(self, session):
        self._session = session

    def load_member(self) -> Optional[dict[str, Any]]:
        data = self._session.get(SESSION_MEMBER_KEY)
        return data if isinstance(data, dict) else None

    def save_member(self, identity: dict[str, Any]) -> None:
        # 로그인 시 세션 고정 공격 방지
        self._session.cycle_key()
        self._session[SESSION_MEMBER_KEY] = dict(identity)

    def clear_member(self) -> None:
        self._session.pop(SESSION_MEMBER_KEY, None)

    def is_admin(self) -> bool:
        return bool(self._session.get(SESSION_ADMIN_KEY, False))

    def set_admin(self, flag: bool) -> None:
        if flag:
            self._session.cycle_key()
            self._session[SESSION_ADMIN_KEY] = True
        else:
            self._session.pop(SESSION_ADMIN_KEY, None)


class InMemoryMemberStore:
    """세션 없이 서비스 계층을 호출할 때 쓰는 dict 기반 구현 (management command, 테스트)."""

    def __init__(self, initial: Optional[dict[str, Any]] = None):
        self.data: dict[str, Any] = dict(initial or {})

    def load_member(self) -> Optional[dict[str, Any]]:
        data = self.data.get(SESSION_MEMBER_KEY)
        return data if isinstance(data, dict) else None

    def save_member(self, identity: dict[str, Any]) -> None:
        self.data[SESSION_MEMBER_KEY] = dict(identity)

    def clear_member(self) -> None:
        self.data.pop(SESSION_MEMBER_KEY, None)

    def is_admin(self) -> bool:
        return bool(self.data.get(SESSION_ADMIN_KEY, False))

    def set_admin(self, flag: bool) -> None:
        if flag:
            self.data[SESSION_ADMIN_KEY] = True
        else:
            self.data.pop(SESSION_ADMIN_KEY, None)
