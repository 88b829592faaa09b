# PATH: apps/domains/reservations/services.py
# 수강 예약 — (회원, 수업) 당 1건. 접수현황 기록은 커밋 이후 비동기(best-effort).

from __future__ import annotations

import logging
from typing import Optional

from django.db import IntegrityError, transaction

from academy.adapters.db.django import repositories_members as member_repo
from academy.adapters.db.django import repositories_reservations as reservation_repo
from academy.adapters.db.django import repositories_timetables as timetable_repo
from academy.domain.members.entities import MemberIdentity
from apps.core.exceptions import AlreadyReserved, InvalidInput, NotFoundError, Unauthenticated
from apps.support.notifications.services import notify_reservation

logger = logging.getLogger(__name__)


def _parse_timetable_id(timetable_id) -> int:
    if timetable_id is None or str(timetable_id).strip() == "":
        raise InvalidInput("수업 정보가 필요합니다.", field="timetable_id")
    try:
        value = int(str(timetable_id).strip())
    except (TypeError, ValueError):
        raise InvalidInput("수업 정보가 올바르지 않습니다.", field="timetable_id")
    if value <= 0:
        raise InvalidInput("수업 정보가 올바르지 않습니다.", field="timetable_id")
    return value


def reserve(member: Optional[MemberIdentity], timetable_id):
    if member is None:
        raise Unauthenticated()

    timetable_id = _parse_timetable_id(timetable_id)

    profile = member_repo.member_get_by_id(member.id)
    if profile is None:
        # 세션에 남은 회원이 DB에 없음
        raise Unauthenticated()

    timetable = timetable_repo.timetable_get_by_id(timetable_id)
    if timetable is None:
        raise NotFoundError("존재하지 않는 수업입니다.")

    if reservation_repo.reservation_exists(profile.id, timetable.id):
        logger.info(
            "[reservations] duplicate member_id=%s timetable_id=%s reason=precheck",
            profile.id,
            timetable.id,
        )
        raise AlreadyReserved()

    with transaction.atomic():
        try:
            with transaction.atomic():
                reservation = reservation_repo.reservation_create(profile.id, timetable.id)
        except IntegrityError:
            # 동시 중복 요청: unique(member, timetable) 위반
            logger.info(
                "[reservations] duplicate member_id=%s timetable_id=%s reason=constraint",
                profile.id,
                timetable.id,
            )
            raise AlreadyReserved()

        notify_reservation({
            "student_name": profile.student_name,
            "school": profile.school,
            "grade": profile.grade,
            "phone": profile.contact_phone,
            "class_name": timetable.class_name,
        })

    logger.info(
        "[reservations] created id=%s member_id=%s timetable_id=%s",
        reservation.id,
        profile.id,
        timetable.id,
    )
    return reservation


def list_all():
    return list(reservation_repo.reservation_list_joined())


def list_for_member(member: Optional[MemberIdentity]):
    if member is None:
        raise Unauthenticated()
    return list(reservation_repo.reservation_filter_member(member.id))


def delete(reservation_id) -> dict:
    """멱등 — 없는 id 도 성공."""
    deleted = reservation_repo.reservation_delete_by_id(reservation_id)
    logger.info("[reservations] delete id=%s deleted=%s", reservation_id, deleted)
    return {"success": True}
