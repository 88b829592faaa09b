# PATH: apps/domains/subscriptions/views.py
from rest_framework import status
from rest_framework.views import APIView
from rest_framework.permissions import AllowAny
from rest_framework.response import Response

from apps.core.permissions import IsAdminSession

from . import services
from .serializers import SmsSubscriptionSerializer


class SmsSubscriptionCreateView(APIView):
    """POST /api/sms-subscriptions {name?, phone}"""
    permission_classes = [AllowAny]

    def post(self, request):
        subscription = services.subscribe(request.data.get("name"), request.data.get("phone"))
        return Response(
            {"success": True, "subscription": SmsSubscriptionSerializer(subscription).data},
            status=status.HTTP_201_CREATED,
        )


class AdminSmsSubscriptionListView(APIView):
    permission_classes = [IsAdminSession]

    def get(self, request):
        return Response(SmsSubscriptionSerializer(services.list_all(), many=True).data)


class AdminSmsSubscriptionDetailView(APIView):
    permission_classes = [IsAdminSession]

    def delete(self, request, pk):
        return Response(services.delete(pk))
