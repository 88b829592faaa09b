"""
전화번호 정규화 및 검증 모듈

저장/비교 기준은 "숫자만 남긴 문자열"이다.
- 010-1234-5678 → 01012345678
- (02) 123-4567 → 021234567
"""

import re
from typing import Optional

MIN_PHONE_DIGITS = 10
# 국제번호(E.164) 최대 자릿수. DB 컬럼(max_length=20) 안에 들어간다.
MAX_PHONE_DIGITS = 15


class PhoneValidationError(ValueError):
    """전화번호 검증 오류"""
    pass


def normalize_phone(phone: Optional[str]) -> str:
    """
    숫자 이외의 문자를 모두 제거한다.

    Examples:
        >>> normalize_phone("010-1234-5678")
        '01012345678'
        >>> normalize_phone(None)
        ''
    """
    if phone is None:
        return ""
    return re.sub(r"\D", "", str(phone))


def validate_phone(
    phone: Optional[str],
    allow_empty: bool = False,
    min_digits: int = MIN_PHONE_DIGITS,
    max_digits: int = MAX_PHONE_DIGITS,
) -> str:
    """
    정규화 후 자릿수(최소~최대)를 검사한다.

    Raises:
        PhoneValidationError: 자릿수가 범위를 벗어난 경우

    Examples:
        >>> validate_phone("010-1234-5678")
        '01012345678'
        >>> validate_phone("", allow_empty=True)
        ''
        >>> validate_phone("123")
        Traceback (most recent call last):
        ...
        PhoneValidationError: Invalid phone number: 123
    """
    normalized = normalize_phone(phone)

    if not normalized:
        if allow_empty:
            return ""
        raise PhoneValidationError("Phone number is required")

    if not min_digits <= len(normalized) <= max_digits:
        raise PhoneValidationError(f"Invalid phone number: {phone}")

    return normalized


def mask_phone(phone: Optional[str]) -> str:
    """로깅용 전화번호 마스킹 (앞3·뒤4만 노출)"""
    if not phone or len(phone) < 7:
        return "***"
    return f"{phone[:3]}****{phone[-4:]}"
