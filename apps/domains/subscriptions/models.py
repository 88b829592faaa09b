from django.db import models

from apps.api.common.models import CreatedAtModel


class SmsSubscription(CreatedAtModel):
    """문자 수신 신청 (학원 소식). 같은 번호의 중복 신청은 허용하고 관리자가 정리한다."""

    name = models.CharField(max_length=50, blank=True, default="")
    phone = models.CharField(max_length=20, db_index=True)

    class Meta:
        db_table = "sms_subscriptions"
        ordering = ["-created_at", "-id"]

    def __str__(self):
        return f"{self.name or '-'} ({self.phone})"
