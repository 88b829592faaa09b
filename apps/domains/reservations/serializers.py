from rest_framework import serializers

from .models import Reservation


class ReservationSerializer(serializers.ModelSerializer):
    """예약 행 + 회원/수업 표시 필드 (관리자 표, 내 예약 목록 공용)"""

    user_id = serializers.IntegerField(source="member_id", read_only=True)
    timetable_id = serializers.IntegerField(read_only=True)

    username = serializers.CharField(source="member.username", read_only=True)
    student_name = serializers.CharField(source="member.student_name", read_only=True)
    member_type = serializers.CharField(source="member.member_type", read_only=True)
    school = serializers.CharField(source="member.school", read_only=True)
    grade = serializers.CharField(source="member.grade", read_only=True)
    student_phone = serializers.CharField(source="member.student_phone", read_only=True)
    parent_phone = serializers.CharField(source="member.parent_phone", read_only=True)

    class_name = serializers.CharField(source="timetable.class_name", read_only=True)
    category = serializers.CharField(source="timetable.category", read_only=True)
    class_time = serializers.CharField(source="timetable.class_time", read_only=True)
    class_date = serializers.CharField(source="timetable.class_date", read_only=True)
    teacher_name = serializers.CharField(source="timetable.teacher_name", read_only=True)

    class Meta:
        model = Reservation
        fields = [
            "id",
            "user_id",
            "timetable_id",
            "created_at",
            "username",
            "student_name",
            "member_type",
            "school",
            "grade",
            "student_phone",
            "parent_phone",
            "class_name",
            "category",
            "class_time",
            "class_date",
            "teacher_name",
        ]
        read_only_fields = fields
