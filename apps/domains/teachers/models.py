from django.db import models
from apps.api.common.models import TimestampModel


class Teacher(TimestampModel):
    """
    강사 소개 (홈페이지 공개용)
    division: 고등관 / 중등관 / 초등관 등 관(館) 구분. 비어 있으면 공통.
    """

    name = models.CharField(max_length=50)
    subject = models.CharField(max_length=50)
    description = models.CharField(max_length=255, help_text="한줄 소개")
    division = models.CharField(max_length=20, blank=True, default="", db_index=True)
    image_url = models.URLField(max_length=500, blank=True, default="")

    class Meta:
        db_table = "teachers"
        ordering = ["-created_at", "-id"]

    def __str__(self):
        return f"{self.name} ({self.subject})"
