"""
Notification 포트 — 외부 접수현황 기록 (best-effort)

구현체는 절대 호출자에게 예외를 전파하지 않는다.
"""
from __future__ import annotations

from typing import Any, Protocol


class NotificationSink(Protocol):

    def notify_reservation(self, payload: dict[str, Any]) -> None:
        """payload keys: student_name, school, grade, phone, class_name"""
        ...

    def notify_subscription(self, payload: dict[str, Any]) -> None:
        """payload keys: name, phone"""
        ...
