# ======================================================================
# PATH: apps/core/session/context.py
# ======================================================================
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from academy.application.ports.session import MemberSessionStore
from academy.domain.members.entities import MemberIdentity


@dataclass
class MemberContext:
    """
    요청 단위 인증 컨텍스트.

    전역 상태 대신 request.member_context 로 핸들러에 명시적으로 전달된다.
    member 는 요청 시작 시점의 세션 스냅샷이며 login/logout 시 함께 갱신된다.
    """

    store: MemberSessionStore
    member: Optional[MemberIdentity] = None
    is_admin: bool = False

    @property
    def is_authenticated(self) -> bool:
        return self.member is not None

    @classmethod
    def from_store(cls, store: MemberSessionStore) -> "MemberContext":
        return cls(
            store=store,
            member=MemberIdentity.from_dict(store.load_member()),
            is_admin=store.is_admin(),
        )

    def authenticate(self, identity: MemberIdentity) -> None:
        self.store.save_member(identity.to_dict())
        self.member = identity

    def forget(self) -> None:
        self.store.clear_member()
        self.member = None

    def grant_admin(self) -> None:
        self.store.set_admin(True)
        self.is_admin = True

    def revoke_admin(self) -> None:
        self.store.set_admin(False)
        self.is_admin = False
