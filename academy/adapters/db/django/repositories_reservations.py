"""
Reservation DB 조회·저장 — .objects. 접근을 adapters 내부로 한정.
"""
from __future__ import annotations


def reservation_exists(member_id, timetable_id) -> bool:
    from apps.domains.reservations.models import Reservation
    return Reservation.objects.filter(member_id=member_id, timetable_id=timetable_id).exists()


def reservation_create(member_id, timetable_id):
    from apps.domains.reservations.models import Reservation
    return Reservation.objects.create(member_id=member_id, timetable_id=timetable_id)


def reservation_list_joined():
    """관리자 목록 — 회원/수업 표시 필드 join, 최신순."""
    from apps.domains.reservations.models import Reservation
    return (
        Reservation.objects.select_related("member", "timetable")
        .order_by("-created_at", "-id")
    )


def reservation_filter_member(member_id):
    from apps.domains.reservations.models import Reservation
    return (
        Reservation.objects.filter(member_id=member_id)
        .select_related("member", "timetable")
        .order_by("-created_at", "-id")
    )


def reservation_delete_by_id(reservation_id) -> int:
    from apps.domains.reservations.models import Reservation
    deleted, _ = Reservation.objects.filter(id=reservation_id).delete()
    return deleted


def reservation_delete_by_timetable(timetable_id) -> int:
    from apps.domains.reservations.models import Reservation
    deleted, _ = Reservation.objects.filter(timetable_id=timetable_id).delete()
    return deleted
