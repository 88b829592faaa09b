"""
Teachers 도메인 DB 조회 — .objects. 접근을 adapters 내부로 한정.
"""
from __future__ import annotations


def teacher_filter_division(division=None):
    """ViewSet get_queryset용. division 이 주어지면 해당 관 + 공통(빈 값) 강사."""
    from django.db.models import Q
    from apps.domains.teachers.models import Teacher
    qs = Teacher.objects.all()
    if division:
        qs = qs.filter(Q(division=division) | Q(division=""))
    return qs
