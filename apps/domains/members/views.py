# PATH: apps/domains/members/views.py
from rest_framework import status
from rest_framework.views import APIView
from rest_framework.permissions import AllowAny
from rest_framework.response import Response

from apps.core.session import get_member_context

from . import services
from .serializers import LoginSerializer, MemberSerializer, normalize_register_payload


# --------------------------------------------------
# /api/auth/register
# --------------------------------------------------

class RegisterView(APIView):
    permission_classes = [AllowAny]

    def post(self, request):
        member = services.register(
            get_member_context(request),
            normalize_register_payload(request.data),
        )
        return Response(
            {"success": True, "member": MemberSerializer(member).data},
            status=status.HTTP_201_CREATED,
        )


# --------------------------------------------------
# /api/auth/login · logout · me
# --------------------------------------------------

class LoginView(APIView):
    permission_classes = [AllowAny]

    def post(self, request):
        serializer = LoginSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        member = services.login(
            get_member_context(request),
            serializer.validated_data["username"],
            serializer.validated_data["password"],
        )
        return Response({"success": True, "member": MemberSerializer(member).data})


class LogoutView(APIView):
    permission_classes = [AllowAny]

    def post(self, request):
        services.logout(get_member_context(request))
        return Response({"success": True})


class MeView(APIView):
    permission_classes = [AllowAny]

    def get(self, request):
        member = services.current_member(get_member_context(request))
        if member is None:
            return Response({"loggedIn": False})
        return Response({"loggedIn": True, "member": member.to_dict()})


class CheckUsernameView(APIView):
    permission_classes = [AllowAny]

    def get(self, request):
        return Response(services.check_username(request.query_params.get("username", "")))
