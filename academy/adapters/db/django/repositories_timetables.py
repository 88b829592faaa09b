"""
Timetables 도메인 DB 조회·삭제 — .objects. 접근을 adapters 내부로 한정.
"""
from __future__ import annotations


def timetable_filter_category(category=None):
    from apps.domains.timetables.models import Timetable
    qs = Timetable.objects.select_related("teacher")
    if category:
        qs = qs.filter(category=category)
    return qs


def timetable_get_by_id(timetable_id):
    from apps.domains.timetables.models import Timetable
    return Timetable.objects.filter(id=timetable_id).first()


def timetable_delete_by_id(timetable_id) -> int:
    from apps.domains.timetables.models import Timetable
    deleted, _ = Timetable.objects.filter(id=timetable_id).delete()
    return deleted
