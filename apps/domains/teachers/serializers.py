# PATH: apps/domains/teachers/serializers.py
from rest_framework import serializers
from .models import Teacher

REQUIRED_MESSAGE = "이름, 과목, 한줄 소개는 필수입니다."


class TeacherSerializer(serializers.ModelSerializer):

    class Meta:
        model = Teacher
        fields = "__all__"
        extra_kwargs = {
            "name": {"required": False, "allow_blank": True},
            "subject": {"required": False, "allow_blank": True},
            "description": {"required": False, "allow_blank": True},
        }

    def validate(self, attrs):
        # 부분 수정(PATCH)은 기존 값 기준
        for field in ("name", "subject", "description"):
            value = attrs.get(field, getattr(self.instance, field, ""))
            if not str(value or "").strip():
                raise serializers.ValidationError(REQUIRED_MESSAGE)
        return attrs
