"""
전화번호 정규화 및 검증 유틸리티

- 입력: 010-1234-5678, 010 1234 5678 등
- 출력: 01012345678 (숫자만)
"""

from .normalizer import (
    MAX_PHONE_DIGITS,
    MIN_PHONE_DIGITS,
    PhoneValidationError,
    mask_phone,
    normalize_phone,
    validate_phone,
)

__all__ = [
    "MAX_PHONE_DIGITS",
    "MIN_PHONE_DIGITS",
    "PhoneValidationError",
    "mask_phone",
    "normalize_phone",
    "validate_phone",
]
