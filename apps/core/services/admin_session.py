# PATH: apps/core/services/admin_session.py
# 관리자 세션 — ADMIN_PASSWORD 1개로 세션에 관리자 플래그를 발급한다.
from __future__ import annotations

import logging

from django.conf import settings
from django.utils.crypto import constant_time_compare

from apps.core.exceptions import AuthError
from apps.core.session import MemberContext

logger = logging.getLogger(__name__)


def admin_login(context: MemberContext, password: str) -> None:
    expected = getattr(settings, "ADMIN_PASSWORD", "") or ""
    if not expected:
        logger.warning("[admin] login rejected: ADMIN_PASSWORD not configured")
        raise AuthError("관리자 비밀번호가 설정되지 않았습니다.", code="admin_not_configured")

    if not constant_time_compare(password or "", expected):
        logger.info("[admin] login failed")
        raise AuthError("비밀번호가 올바르지 않습니다.", code="admin_invalid_password")

    context.grant_admin()
    logger.info("[admin] login")


def admin_logout(context: MemberContext) -> None:
    context.revoke_admin()


def admin_status(context: MemberContext) -> dict:
    return {"isAdmin": context.is_admin}
