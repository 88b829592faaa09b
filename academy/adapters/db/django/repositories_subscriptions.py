"""
SmsSubscription DB 조회·저장 — .objects. 접근을 adapters 내부로 한정.
"""
from __future__ import annotations


def subscription_create(name, phone):
    from apps.domains.subscriptions.models import SmsSubscription
    return SmsSubscription.objects.create(name=name, phone=phone)


def subscription_all():
    from apps.domains.subscriptions.models import SmsSubscription
    return SmsSubscription.objects.all().order_by("-created_at", "-id")


def subscription_delete_by_id(subscription_id) -> int:
    from apps.domains.subscriptions.models import SmsSubscription
    deleted, _ = SmsSubscription.objects.filter(id=subscription_id).delete()
    return deleted
