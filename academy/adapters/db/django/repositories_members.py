"""
Members 도메인 DB 조회·저장 — .objects. 접근을 adapters 내부로 한정.
"""
from __future__ import annotations


def member_get_by_username(username):
    from apps.domains.members.models import Member
    return Member.objects.filter(username=username).first()


def member_get_by_id(member_id):
    from apps.domains.members.models import Member
    return Member.objects.filter(id=member_id).first()


def member_username_exists(username) -> bool:
    from apps.domains.members.models import Member
    return Member.objects.filter(username=username).exists()


def member_create(**fields):
    from apps.domains.members.models import Member
    return Member.objects.create(**fields)
