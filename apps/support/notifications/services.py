# apps/support/notifications/services.py
"""
접수현황 알림 — 트랜잭션 커밋 후 Celery 태스크로 넘긴다 (fire-and-forget).

- 호출자(예약/구독)는 결과를 기다리지 않는다
- enqueue 실패(브로커 장애 등)도 로그만 남긴다
- NOTIFICATIONS_ENABLED=False 면 아무것도 하지 않는다
"""
from __future__ import annotations

import logging
from typing import Any

from django.conf import settings
from django.db import transaction

from academy.application.ports.notifications import NotificationSink

from . import tasks

logger = logging.getLogger(__name__)


class CeleryNotificationSink:
    """NotificationSink 구현 — on_commit + task.delay"""

    def _dispatch(self, task, kind: str, payload: dict[str, Any]) -> None:
        if not getattr(settings, "NOTIFICATIONS_ENABLED", True):
            logger.debug("[notifications] disabled, %s dropped", kind)
            return

        payload = dict(payload)

        def _enqueue():
            try:
                task.delay(payload)
            except Exception:
                logger.exception("[notifications] enqueue failed kind=%s", kind)

        transaction.on_commit(_enqueue)

    def notify_reservation(self, payload: dict[str, Any]) -> None:
        self._dispatch(tasks.append_reservation_row, "reservation", payload)

    def notify_subscription(self, payload: dict[str, Any]) -> None:
        self._dispatch(tasks.append_subscription_row, "subscription", payload)


default_sink: NotificationSink = CeleryNotificationSink()


def notify_reservation(payload: dict[str, Any]) -> None:
    default_sink.notify_reservation(payload)


def notify_subscription(payload: dict[str, Any]) -> None:
    default_sink.notify_subscription(payload)
