from django.db import models

from apps.api.common.models import CreatedAtModel
from apps.domains.members.models import Member
from apps.domains.timetables.models import Timetable


# ========================================================
# Reservation (회원 1명 ↔ 수업 1개)
# ========================================================

class Reservation(CreatedAtModel):
    """
    회원의 수강 예약.
    (member, timetable) 쌍은 유일하다 — 서비스 사전 조회 + DB 제약 이중 보장.

    timetable 삭제는 apps.domains.timetables.services.delete_timetable 이
    예약을 먼저 지운 뒤 수행한다 (PROTECT: 우회 삭제 차단).
    """

    member = models.ForeignKey(
        Member,
        on_delete=models.CASCADE,
        related_name="reservations",
        db_column="user_id",
    )
    timetable = models.ForeignKey(
        Timetable,
        on_delete=models.PROTECT,
        related_name="reservations",
    )

    class Meta:
        db_table = "reservations"
        ordering = ["-created_at", "-id"]
        constraints = [
            models.UniqueConstraint(
                fields=["member", "timetable"],
                name="unique_reservation_per_member_timetable",
            )
        ]

    def __str__(self):
        return f"{self.member.username} -> {self.timetable.class_name}"
