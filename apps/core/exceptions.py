# PATH: apps/core/exceptions.py
"""
도메인 예외 계층

모든 예외는 code / message / http_status 를 가진다.
API 레이어(apps.api.common.exceptions)가 {"error": message} 로 변환한다.
"""
from __future__ import annotations

from typing import Optional


class DomainError(Exception):
    code = "error"
    default_message = "요청을 처리할 수 없습니다."
    http_status = 400

    def __init__(
        self,
        message: Optional[str] = None,
        *,
        code: Optional[str] = None,
        field: Optional[str] = None,
    ):
        self.message = str(message or self.default_message)
        super().__init__(self.message)
        if code:
            self.code = str(code)
        self.field = field


# --------------------------------------------------
# 400 Validation
# --------------------------------------------------

class ValidationError(DomainError):
    code = "validation_error"
    default_message = "입력값을 확인해 주세요."
    http_status = 400


class InvalidInput(ValidationError):
    code = "invalid_input"


class InvalidOrExpiredCode(ValidationError):
    code = "invalid_or_expired_code"
    default_message = "인증번호가 올바르지 않거나 만료되었습니다."


# --------------------------------------------------
# 401 Auth
# --------------------------------------------------

class AuthError(DomainError):
    code = "auth_error"
    default_message = "인증이 필요합니다."
    http_status = 401


class Unauthenticated(AuthError):
    code = "unauthenticated"
    default_message = "로그인이 필요합니다."


class InvalidCredentials(AuthError):
    code = "invalid_credentials"
    default_message = "아이디 또는 비밀번호가 올바르지 않습니다."


# --------------------------------------------------
# 400 Conflict
# --------------------------------------------------

class ConflictError(DomainError):
    code = "conflict"
    default_message = "이미 처리된 요청입니다."
    http_status = 400


class DuplicateUsername(ConflictError):
    code = "duplicate_username"
    default_message = "이미 사용 중인 아이디입니다."


class AlreadyReserved(ConflictError):
    code = "already_reserved"
    default_message = "이미 예약한 수업입니다."


# --------------------------------------------------
# 404 / 500
# --------------------------------------------------

class NotFoundError(DomainError):
    code = "not_found"
    default_message = "대상을 찾을 수 없습니다."
    http_status = 404


class DependencyError(DomainError):
    code = "dependency_error"
    default_message = "외부 서비스 호출에 실패했습니다."
    http_status = 500
