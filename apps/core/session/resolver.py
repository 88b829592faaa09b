# ======================================================================
# PATH: apps/core/session/resolver.py
# ======================================================================
from __future__ import annotations

from django.conf import settings
from django.utils.module_loading import import_string

from .context import MemberContext

DEFAULT_STORE_CLASS = "apps.core.session.store.DjangoSessionMemberStore"


def _store_class():
    path = getattr(settings, "MEMBER_SESSION_STORE", "") or DEFAULT_STORE_CLASS
    return import_string(path)


def resolve_member_context(request) -> MemberContext:
    """
    request.session → MemberContext.

    세션 미들웨어가 없는 요청(내부 호출 등)도 실패하지 않는다.
    """
    session = getattr(request, "session", None)
    if session is None:
        from .store import InMemoryMemberStore
        return MemberContext.from_store(InMemoryMemberStore())
    return MemberContext.from_store(_store_class()(session))


def get_member_context(request) -> MemberContext:
    """
    뷰에서 사용. DRF Request 는 원본 HttpRequest 속성을 프록시한다.
    미들웨어가 빠진 경우를 대비해 lazy 생성.
    """
    ctx = getattr(request, "member_context", None)
    if ctx is None:
        ctx = resolve_member_context(request)
        request.member_context = ctx
    return ctx
