"""
PhoneVerification DB 조회·저장 — .objects. 접근을 adapters 내부로 한정.
"""
from __future__ import annotations


def verification_retire_unverified(phone) -> int:
    """phone 의 미인증 레코드를 모두 verified=True 로 폐기. 폐기 건수 반환."""
    from apps.domains.verification.models import PhoneVerification
    return PhoneVerification.objects.filter(phone=phone, verified=False).update(verified=True)


def verification_create(phone, code, expires_at):
    from apps.domains.verification.models import PhoneVerification
    return PhoneVerification.objects.create(
        phone=phone,
        code=code,
        expires_at=expires_at,
        verified=False,
    )


def verification_latest_active(phone, code, now):
    """phone+code 일치, 미인증, 미만료 중 가장 최근 1건 (row lock)."""
    from apps.domains.verification.models import PhoneVerification
    return (
        PhoneVerification.objects.select_for_update()
        .filter(phone=phone, code=code, verified=False, expires_at__gt=now)
        .order_by("-created_at", "-id")
        .first()
    )


def verification_mark_verified(record) -> None:
    record.verified = True
    record.save(update_fields=["verified"])
