from rest_framework import serializers

from .models import Member

# 웹 클라이언트가 보내는 camelCase 키 → 모델 필드
REGISTER_FIELD_ALIASES = {
    "memberType": "member_type",
    "studentName": "student_name",
    "studentPhone": "student_phone",
    "parentPhone": "parent_phone",
    "academyStatus": "academy_status",
}

REGISTER_FIELDS = (
    "username",
    "password",
    "member_type",
    "student_name",
    "gender",
    "track",
    "grade",
    "school",
    "student_phone",
    "parent_phone",
    "birthday",
    "subject",
    "email",
    "academy_status",
)


class MemberSerializer(serializers.ModelSerializer):
    """공개 프로필 (password 제외)"""

    class Meta:
        model = Member
        fields = [
            "id",
            "username",
            "member_type",
            "student_name",
            "gender",
            "track",
            "grade",
            "school",
            "student_phone",
            "parent_phone",
            "birthday",
            "subject",
            "email",
            "academy_status",
            "created_at",
        ]
        read_only_fields = fields


def normalize_register_payload(data) -> dict:
    """
    request.data → 서비스 입력 dict.
    검증(형식/필수값)은 services.register → validators 에서 수행한다.
    """
    payload = {}
    for key, value in dict(data).items():
        if isinstance(value, list):
            # QueryDict.dict() 와 동일하게 마지막 값
            value = value[-1] if value else ""
        field = REGISTER_FIELD_ALIASES.get(key, key)
        if field in REGISTER_FIELDS:
            payload[field] = value
    return payload


class LoginSerializer(serializers.Serializer):
    username = serializers.CharField(allow_blank=True, required=False, default="")
    password = serializers.CharField(allow_blank=True, required=False, default="", trim_whitespace=False)
