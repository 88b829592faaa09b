# apps/core/views.py

from rest_framework.views import APIView
from rest_framework.permissions import AllowAny
from rest_framework.response import Response

from drf_yasg.utils import swagger_auto_schema

from apps.core.services.admin_session import admin_login, admin_logout, admin_status
from apps.core.session import get_member_context


# --------------------------------------------------
# Admin session: /api/admin/login|logout|status
# --------------------------------------------------

class AdminLoginView(APIView):
    permission_classes = [AllowAny]

    @swagger_auto_schema(auto_schema=None)
    def post(self, request):
        admin_login(get_member_context(request), request.data.get("password"))
        return Response({"success": True})


class AdminLogoutView(APIView):
    permission_classes = [AllowAny]

    @swagger_auto_schema(auto_schema=None)
    def post(self, request):
        admin_logout(get_member_context(request))
        return Response({"success": True})


class AdminStatusView(APIView):
    permission_classes = [AllowAny]

    @swagger_auto_schema(auto_schema=None)
    def get(self, request):
        return Response(admin_status(get_member_context(request)))
