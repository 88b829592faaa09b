# PATH: apps/api/common/models.py
from django.db import models


class CreatedAtModel(models.Model):
    """
    생성 시간만 기록하는 추상 모델 (append 위주 테이블: 예약, 인증번호, 구독)
    """
    created_at = models.DateTimeField(auto_now_add=True, db_index=True)

    class Meta:
        abstract = True


class TimestampModel(CreatedAtModel):
    """
    생성 / 수정 시간 자동 기록 추상 모델 (관리자 편집 대상: 강사, 시간표)
    """
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        abstract = True
