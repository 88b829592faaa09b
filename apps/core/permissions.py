#apps/core/permissions.py

from rest_framework.permissions import BasePermission

from apps.core.exceptions import AuthError, Unauthenticated
from apps.core.session import get_member_context


class IsMember(BasePermission):
    """
    회원 전용 Permission
    - 세션에 회원 식별 정보 필수
    - 실패 시 401 (DRF 기본 403 대신 도메인 예외)
    """

    def has_permission(self, request, view):
        if not get_member_context(request).is_authenticated:
            raise Unauthenticated()
        return True


class IsAdminSession(BasePermission):
    """
    관리자 전용 Permission
    - /api/admin/login 으로 세션에 관리자 플래그가 있어야 함
    """

    def has_permission(self, request, view):
        if not get_member_context(request).is_admin:
            raise AuthError("관리자 로그인이 필요합니다.", code="admin_required")
        return True


class IsAdminSessionOrReadOnly(IsAdminSession):
    """공개 조회 + 관리자 변경 (teachers / timetables)."""

    SAFE_METHODS = ("GET", "HEAD", "OPTIONS")

    def has_permission(self, request, view):
        if request.method in self.SAFE_METHODS:
            return True
        return super().has_permission(request, view)
