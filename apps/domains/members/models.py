from django.db import models

from apps.api.common.models import CreatedAtModel


class Member(CreatedAtModel):
    """
    홈페이지 회원 (학생 / 학부모)

    - 관리자 계정과 분리된 사이트 회원 테이블
    - password 는 Django password hasher 로 저장 (salted, one-way)
    - 전화번호는 숫자만 저장
    """

    class MemberType(models.TextChoices):
        STUDENT = "student", "학생"
        PARENT = "parent", "학부모"

    class AcademyStatus(models.TextChoices):
        NONE = "none", "없음"
        FORMER = "former", "재원 했었음"
        CURRENT = "current", "재원 중"

    username = models.CharField(max_length=15, unique=True)
    password = models.CharField(max_length=128)

    member_type = models.CharField(
        max_length=10,
        choices=MemberType.choices,
        default=MemberType.STUDENT,
    )

    student_name = models.CharField(max_length=50)
    gender = models.CharField(max_length=10)
    track = models.CharField(max_length=20, help_text="계열 (문과/이과/예체능)")
    grade = models.CharField(max_length=10)
    school = models.CharField(max_length=100)

    student_phone = models.CharField(max_length=20, blank=True, default="")
    parent_phone = models.CharField(max_length=20)

    birthday = models.CharField(max_length=20, blank=True, default="")
    subject = models.CharField(max_length=50, blank=True, default="")
    email = models.EmailField(blank=True, default="")

    academy_status = models.CharField(
        max_length=10,
        choices=AcademyStatus.choices,
        default=AcademyStatus.NONE,
    )

    class Meta:
        db_table = "members"
        ordering = ["-id"]

    def __str__(self):
        return f"{self.username} ({self.student_name})"

    @property
    def contact_phone(self) -> str:
        """접수현황 기록용 연락처 (학생 번호 우선)"""
        return self.student_phone or self.parent_phone
