# PATH: apps/domains/timetables/services.py
from __future__ import annotations

import logging

from django.db import transaction

from academy.adapters.db.django import repositories_reservations as reservation_repo
from academy.adapters.db.django import repositories_timetables as timetable_repo
from apps.core.exceptions import NotFoundError

logger = logging.getLogger(__name__)


@transaction.atomic
def delete_timetable(timetable_id) -> dict:
    """
    시간표 삭제 — 참조 중인 예약을 먼저 지운 뒤 시간표 삭제 (한 트랜잭션).
    """
    timetable = timetable_repo.timetable_get_by_id(timetable_id)
    if timetable is None:
        raise NotFoundError("존재하지 않는 수업입니다.")

    reservations_deleted = reservation_repo.reservation_delete_by_timetable(timetable.id)
    timetable_repo.timetable_delete_by_id(timetable.id)

    logger.info(
        "[timetables] deleted id=%s class_name=%r reservations_deleted=%s",
        timetable.id,
        timetable.class_name,
        reservations_deleted,
    )
    return {"success": True, "reservations_deleted": reservations_deleted}
