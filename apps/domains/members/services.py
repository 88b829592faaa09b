# PATH: apps/domains/members/services.py
# 회원 인증 서비스 — 세션 상태는 MemberContext(요청 단위)로만 다룬다.

from __future__ import annotations

import logging
from typing import Optional

from django.contrib.auth.hashers import check_password, make_password
from django.db import IntegrityError, transaction

from academy.adapters.db.django import repositories_members as member_repo
from academy.domain.members.entities import MemberIdentity
from apps.core.exceptions import DuplicateUsername, InvalidCredentials, ValidationError
from apps.core.session import MemberContext

from .models import Member
from .validators import USERNAME_FORMAT_MESSAGE, USERNAME_RE, validate_registration

logger = logging.getLogger(__name__)


def to_identity(member: Member) -> MemberIdentity:
    return MemberIdentity(
        id=member.id,
        username=member.username,
        member_type=member.member_type,
        student_name=member.student_name,
    )


def current_member(context: MemberContext) -> Optional[MemberIdentity]:
    """세션에 캐시된 회원 식별 정보. 비로그인은 None (오류 아님)."""
    return context.member


def login(context: MemberContext, username: str, password: str) -> Member:
    username = (username or "").strip()
    password = password or ""

    member = member_repo.member_get_by_username(username) if username else None
    if member is None:
        # 존재하지 않는 아이디도 해시 비용을 동일하게
        make_password(password)
        logger.info("[auth] login failed username=%r reason=not_found", username)
        raise InvalidCredentials()

    if not check_password(password, member.password):
        logger.info("[auth] login failed member_id=%s reason=bad_password", member.id)
        raise InvalidCredentials()

    context.authenticate(to_identity(member))
    logger.info("[auth] login member_id=%s", member.id)
    return member


def register(context: MemberContext, fields: dict) -> Member:
    cleaned = validate_registration(fields)

    if member_repo.member_username_exists(cleaned["username"]):
        raise DuplicateUsername(field="username")

    cleaned["password"] = make_password(cleaned["password"])
    try:
        with transaction.atomic():
            member = member_repo.member_create(**cleaned)
    except IntegrityError:
        # 동시 가입: unique(username) 위반
        raise DuplicateUsername(field="username")

    context.authenticate(to_identity(member))
    logger.info(
        "[auth] register member_id=%s username=%s type=%s",
        member.id,
        member.username,
        member.member_type,
    )
    return member


def logout(context: MemberContext) -> None:
    if context.member is not None:
        logger.info("[auth] logout member_id=%s", context.member.id)
    context.forget()


def check_username(username: str) -> dict:
    username = (username or "").strip()
    if not USERNAME_RE.match(username):
        raise ValidationError(USERNAME_FORMAT_MESSAGE, field="username")
    if member_repo.member_username_exists(username):
        return {"available": False, "message": "이미 사용 중인 아이디입니다."}
    return {"available": True, "message": "사용 가능한 아이디입니다."}
