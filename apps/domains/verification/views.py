# PATH: apps/domains/verification/views.py
from rest_framework.views import APIView
from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from rest_framework.throttling import ScopedRateThrottle

from . import services


class PhoneCodeSendView(APIView):
    """POST /api/auth/phone/send {phone}"""
    permission_classes = [AllowAny]
    throttle_classes = [ScopedRateThrottle]
    throttle_scope = "phone_send"

    def post(self, request):
        return Response(services.request_code(request.data.get("phone")))


class PhoneCodeVerifyView(APIView):
    """POST /api/auth/phone/verify {phone, code}"""
    permission_classes = [AllowAny]
    throttle_classes = [ScopedRateThrottle]
    throttle_scope = "phone_verify"

    def post(self, request):
        return Response(
            services.verify_code(request.data.get("phone"), request.data.get("code"))
        )
