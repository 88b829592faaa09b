# PATH: apps/domains/members/validators.py
"""
회원가입 입력 검증 — 첫 번째 오류 필드만 보고한다 (프론트가 폼 옆에 한 줄 표시).
"""
from __future__ import annotations

import re
from typing import Any

from django.core.exceptions import ValidationError as DjangoValidationError
from django.core.validators import validate_email

from apps.core.exceptions import ValidationError
from libs.phone_util import PhoneValidationError, validate_phone

from .models import Member

USERNAME_RE = re.compile(r"^[a-z0-9]{6,15}$")
MIN_PASSWORD_LENGTH = 6

USERNAME_FORMAT_MESSAGE = "아이디는 6~15자의 영문 소문자, 숫자만 가능합니다."

# (필드, 비어 있을 때 메시지) — 폼 순서대로 검사
REQUIRED_TEXT_FIELDS = (
    ("student_name", "학생이름을 입력해 주세요."),
    ("gender", "성별을 선택해 주세요."),
    ("track", "계열을 선택해 주세요."),
    ("grade", "학년을 선택해 주세요."),
    ("school", "학교를 입력해 주세요."),
)


def _text(data: dict, key: str) -> str:
    value = data.get(key)
    return "" if value is None else str(value).strip()


def _check_length(field: str, value: str) -> str:
    max_length = Member._meta.get_field(field).max_length
    if max_length and len(value) > max_length:
        raise ValidationError(f"{max_length}자 이내로 입력해 주세요.", field=field)
    return value


def validate_username(username: Any) -> str:
    username = "" if username is None else str(username).strip()
    if not USERNAME_RE.match(username):
        raise ValidationError(USERNAME_FORMAT_MESSAGE, field="username")
    return username


def validate_registration(data: dict) -> dict:
    """
    원본 입력(dict) → 정규화된 Member 필드(dict, password 는 평문 그대로).

    Raises:
        ValidationError: field 속성에 문제 필드명
    """
    cleaned: dict[str, Any] = {}

    cleaned["username"] = validate_username(data.get("username"))

    password = data.get("password")
    password = "" if password is None else str(password)
    if len(password) < MIN_PASSWORD_LENGTH:
        raise ValidationError("비밀번호는 6자 이상이어야 합니다.", field="password")
    cleaned["password"] = password

    member_type = _text(data, "member_type") or Member.MemberType.STUDENT.value
    if member_type not in Member.MemberType.values:
        raise ValidationError("회원 구분을 확인해 주세요.", field="member_type")
    cleaned["member_type"] = member_type

    for field, message in REQUIRED_TEXT_FIELDS:
        value = _text(data, field)
        if not value:
            raise ValidationError(message, field=field)
        cleaned[field] = _check_length(field, value)

    try:
        cleaned["parent_phone"] = validate_phone(data.get("parent_phone"))
    except PhoneValidationError:
        raise ValidationError("학부모 휴대폰 번호를 입력해 주세요.", field="parent_phone")

    try:
        cleaned["student_phone"] = validate_phone(data.get("student_phone"), allow_empty=True)
    except PhoneValidationError:
        raise ValidationError("학생 휴대폰 번호를 확인해 주세요.", field="student_phone")

    email = _check_length("email", _text(data, "email"))
    if email:
        try:
            validate_email(email)
        except DjangoValidationError:
            raise ValidationError("이메일 형식을 확인해 주세요.", field="email")
    cleaned["email"] = email

    academy_status = _text(data, "academy_status") or Member.AcademyStatus.NONE.value
    if academy_status not in Member.AcademyStatus.values:
        raise ValidationError("재원 여부를 확인해 주세요.", field="academy_status")
    cleaned["academy_status"] = academy_status

    cleaned["birthday"] = _check_length("birthday", _text(data, "birthday"))
    cleaned["subject"] = _check_length("subject", _text(data, "subject"))

    return cleaned
