# PATH: apps/domains/timetables/views.py
import logging

from rest_framework import status
from rest_framework.viewsets import ModelViewSet
from rest_framework.response import Response

from apps.core.permissions import IsAdminSessionOrReadOnly
from academy.adapters.db.django import repositories_timetables as timetable_repo
from .serializers import TimetableSerializer
from .services import delete_timetable

logger = logging.getLogger(__name__)


class TimetableViewSet(ModelViewSet):
    """
    GET    /api/timetables?category=   공개 (최신순)
    POST   /api/timetables             관리자
    PATCH  /api/timetables/<id>        관리자
    DELETE /api/timetables/<id>        관리자 (예약 cascade)
    """
    serializer_class = TimetableSerializer
    filterset_fields = ["category"]
    permission_classes = [IsAdminSessionOrReadOnly]

    def get_queryset(self):
        # ?category= 는 DjangoFilterBackend 가 처리
        return timetable_repo.timetable_filter_category()

    def perform_create(self, serializer):
        timetable = serializer.save()
        logger.info("[timetables] created id=%s class_name=%r", timetable.id, timetable.class_name)

    def destroy(self, request, *args, **kwargs):
        result = delete_timetable(kwargs["pk"])
        return Response(result, status=status.HTTP_200_OK)
