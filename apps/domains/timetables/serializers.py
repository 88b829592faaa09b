from rest_framework import serializers

from .models import Timetable

REQUIRED_MESSAGE = "수업명과 카테고리는 필수입니다."


class TimetableSerializer(serializers.ModelSerializer):

    class Meta:
        model = Timetable
        fields = "__all__"
        extra_kwargs = {
            "class_name": {"required": False, "allow_blank": True},
            "category": {"required": False, "allow_blank": True},
        }

    def validate(self, attrs):
        for field in ("class_name", "category"):
            value = attrs.get(field, getattr(self.instance, field, ""))
            if not str(value or "").strip():
                raise serializers.ValidationError(REQUIRED_MESSAGE)

        # 강사 선택 시 표시용 이름/사진을 비어 있는 경우에만 채움
        teacher = attrs.get("teacher")
        if teacher is not None:
            if not attrs.get("teacher_name"):
                attrs["teacher_name"] = teacher.name
            if not attrs.get("teacher_image_url"):
                attrs["teacher_image_url"] = teacher.image_url
        return attrs
