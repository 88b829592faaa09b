# PATH: apps/domains/verification/services.py
"""
휴대폰 인증번호 발급 / 확인

- 인증번호: 100000~999999 균등 난수 (secrets)
- 유효시간: 발급 후 3분
- 실제 SMS 발송은 하지 않는다. 인증번호는 서버 로그로만 확인 가능.
  (실발송 연동 시 request_code 의 발급 직후가 접점)
- 시도 횟수 제한은 서비스가 아닌 API 레이어(DRF throttle)에서 처리
"""
from __future__ import annotations

import logging
import secrets
from datetime import timedelta

from django.db import IntegrityError, transaction
from django.utils import timezone

from academy.adapters.db.django import repositories_verification as verification_repo
from apps.core.exceptions import InvalidInput, InvalidOrExpiredCode
from libs.phone_util import MIN_PHONE_DIGITS, PhoneValidationError, mask_phone, normalize_phone, validate_phone

logger = logging.getLogger(__name__)

CODE_TTL = timedelta(minutes=3)
CODE_MIN = 100000
CODE_MAX = 999999


def _now():
    return timezone.now()


def generate_code() -> str:
    return str(CODE_MIN + secrets.randbelow(CODE_MAX - CODE_MIN + 1))


def _issue(phone: str, code: str, expires_at):
    verification_repo.verification_retire_unverified(phone)
    return verification_repo.verification_create(phone=phone, code=code, expires_at=expires_at)


def request_code(phone: str) -> dict:
    try:
        phone = validate_phone(phone, min_digits=MIN_PHONE_DIGITS)
    except PhoneValidationError:
        raise InvalidInput("올바른 휴대폰 번호를 입력해 주세요.", field="phone")

    code = generate_code()
    expires_at = _now() + CODE_TTL

    with transaction.atomic():
        try:
            with transaction.atomic():
                record = _issue(phone, code, expires_at)
        except IntegrityError:
            # 동시 발급: 다른 요청이 먼저 활성 레코드를 만든 경우 → 그 레코드도 폐기하고 재발급
            logger.info("[phone_verification] concurrent issue phone=%s, superseding", mask_phone(phone))
            record = _issue(phone, code, expires_at)

    logger.info(
        "[phone_verification] code issued phone=%s code=%s id=%s expires_at=%s",
        mask_phone(phone),
        code,
        record.id,
        expires_at.isoformat(),
    )
    return {"success": True}


def verify_code(phone: str, code: str) -> dict:
    phone = normalize_phone(phone)
    code = str(code or "").strip()
    if not phone or not code:
        raise InvalidOrExpiredCode()

    with transaction.atomic():
        record = verification_repo.verification_latest_active(phone, code, _now())
        if record is None:
            logger.info("[phone_verification] verify failed phone=%s", mask_phone(phone))
            raise InvalidOrExpiredCode()
        verification_repo.verification_mark_verified(record)

    logger.info("[phone_verification] verified phone=%s id=%s", mask_phone(phone), record.id)
    return {"success": True}
