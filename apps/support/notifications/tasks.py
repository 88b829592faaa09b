# apps/support/notifications/tasks.py
from __future__ import annotations

import logging

from celery import shared_task

from apps.core.exceptions import DependencyError
from libs.phone_util import mask_phone

from . import sheets

logger = logging.getLogger(__name__)


def _append(kind: str, row: list[str]) -> dict:
    """
    시트 기록 1건. 어떤 실패도 raise 하지 않는다 (best-effort, 재시도 없음).
    """
    try:
        sheets.append_row(row)
    except DependencyError as e:
        logger.warning("[notifications] %s skipped reason=%s", kind, e.code)
        return {"status": "skipped", "reason": e.code}
    except Exception as e:
        logger.exception("[notifications] %s append failed phone=%s", kind, mask_phone(row[5]))
        return {"status": "error", "reason": str(e)[:500]}

    logger.info("[notifications] %s appended phone=%s", kind, mask_phone(row[5]))
    return {"status": "ok"}


@shared_task(name="notifications.append_reservation_row", ignore_result=True)
def append_reservation_row(payload: dict) -> dict:
    """수강예약 → 접수현황 시트"""
    return _append("reservation", sheets.reservation_row(payload or {}))


@shared_task(name="notifications.append_subscription_row", ignore_result=True)
def append_subscription_row(payload: dict) -> dict:
    """문자수신 신청 → 접수현황 시트"""
    return _append("subscription", sheets.subscription_row(payload or {}))
