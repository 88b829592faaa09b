from django.db import models
from django.db.models import Q

from apps.api.common.models import CreatedAtModel


class PhoneVerification(CreatedAtModel):
    """
    휴대폰 인증번호 발급 기록

    🔒 전화번호당 활성(verified=False) 레코드는 최대 1개
    - 발급 시 기존 미인증 레코드를 verified=True 로 폐기한 뒤 insert
    - 동시 발급은 DB 제약(partial unique)으로 차단
    - 만료 레코드는 삭제하지 않는다 (조회 조건 expires_at > now 로 배제)
    """

    phone = models.CharField(max_length=20, db_index=True)
    code = models.CharField(max_length=6)
    expires_at = models.DateTimeField()
    verified = models.BooleanField(default=False)

    class Meta:
        db_table = "phone_verifications"
        ordering = ["-created_at", "-id"]
        constraints = [
            models.UniqueConstraint(
                fields=["phone"],
                condition=Q(verified=False),
                name="phone_verifications_one_active_per_phone",
            ),
        ]

    def __str__(self):
        return f"PhoneVerification<{self.phone}> verified={self.verified}"
