# PATH: apps/domains/reservations/views.py
from rest_framework import status
from rest_framework.views import APIView
from rest_framework.response import Response

from apps.core.permissions import IsAdminSession, IsMember
from apps.core.session import get_member_context

from . import services
from .serializers import ReservationSerializer


# --------------------------------------------------
# 회원: /api/reservations
# --------------------------------------------------

class ReservationCreateView(APIView):
    permission_classes = [IsMember]

    def post(self, request):
        reservation = services.reserve(
            get_member_context(request).member,
            request.data.get("timetable_id"),
        )
        return Response(
            ReservationSerializer(reservation).data,
            status=status.HTTP_201_CREATED,
        )


class MyReservationListView(APIView):
    permission_classes = [IsMember]

    def get(self, request):
        rows = services.list_for_member(get_member_context(request).member)
        return Response(ReservationSerializer(rows, many=True).data)


# --------------------------------------------------
# 관리자: /api/admin/reservations
# --------------------------------------------------

class AdminReservationListView(APIView):
    permission_classes = [IsAdminSession]

    def get(self, request):
        return Response(ReservationSerializer(services.list_all(), many=True).data)


class AdminReservationDetailView(APIView):
    permission_classes = [IsAdminSession]

    def delete(self, request, pk):
        return Response(services.delete(pk))
