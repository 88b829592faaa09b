# PATH: apps/domains/subscriptions/services.py
from __future__ import annotations

import logging

from django.db import transaction

from academy.adapters.db.django import repositories_subscriptions as subscription_repo
from apps.core.exceptions import InvalidInput
from apps.support.notifications.services import notify_subscription
from libs.phone_util import PhoneValidationError, mask_phone, validate_phone

logger = logging.getLogger(__name__)


def subscribe(name, phone):
    try:
        phone = validate_phone(phone)
    except PhoneValidationError:
        raise InvalidInput("올바른 휴대폰 번호를 입력해 주세요.", field="phone")
    name = str(name or "").strip()[:50]

    with transaction.atomic():
        subscription = subscription_repo.subscription_create(name=name, phone=phone)
        notify_subscription({"name": name, "phone": phone})

    logger.info("[subscriptions] created id=%s phone=%s", subscription.id, mask_phone(phone))
    return subscription


def list_all():
    return list(subscription_repo.subscription_all())


def delete(subscription_id) -> dict:
    """멱등 — 없는 id 도 성공."""
    deleted = subscription_repo.subscription_delete_by_id(subscription_id)
    logger.info("[subscriptions] delete id=%s deleted=%s", subscription_id, deleted)
    return {"success": True}
