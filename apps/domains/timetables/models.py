from django.db import models

from apps.api.common.models import TimestampModel
from apps.domains.teachers.models import Teacher


# ========================================================
# Timetable (예약 가능한 수업)
# ========================================================

class Timetable(TimestampModel):
    """
    공개 시간표의 수업 1건.
    class_time / class_date 는 화면 표시용 문자열 그대로 저장한다.
    예약(Reservation)은 이 수업을 참조하며, 삭제 시 서비스 계층이 먼저 정리한다.
    """

    teacher = models.ForeignKey(
        Teacher,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="timetables",
    )
    teacher_name = models.CharField(max_length=50, blank=True, default="")
    teacher_image_url = models.URLField(max_length=500, blank=True, default="")

    category = models.CharField(max_length=50, db_index=True, help_text="관/학년 구분 태그")
    target_school = models.CharField(max_length=100, blank=True, default="")
    subject = models.CharField(max_length=50, blank=True, default="")
    class_name = models.CharField(max_length=200)
    class_time = models.CharField(max_length=100, blank=True, default="")
    class_date = models.CharField(max_length=100, blank=True, default="", help_text="개강일 (표시용)")
    description = models.TextField(blank=True, default="")

    class Meta:
        db_table = "timetables"
        ordering = ["-created_at", "-id"]

    def __str__(self):
        return f"[{self.category}] {self.class_name}"
