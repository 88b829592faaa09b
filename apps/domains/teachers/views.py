# PATH: apps/domains/teachers/views.py
import logging

from rest_framework.response import Response
from rest_framework.viewsets import ModelViewSet

from apps.core.permissions import IsAdminSessionOrReadOnly
from academy.adapters.db.django import repositories_teachers as teacher_repo
from .serializers import TeacherSerializer

logger = logging.getLogger(__name__)


class TeacherViewSet(ModelViewSet):
    """
    GET    /api/teachers?division=   공개
    POST   /api/teachers             관리자
    PATCH  /api/teachers/<id>        관리자
    DELETE /api/teachers/<id>        관리자 (연결된 시간표의 teacher 는 NULL)
    """
    serializer_class = TeacherSerializer
    permission_classes = [IsAdminSessionOrReadOnly]

    def get_queryset(self):
        division = (self.request.query_params.get("division") or "").strip()
        return teacher_repo.teacher_filter_division(division or None)

    def perform_create(self, serializer):
        teacher = serializer.save()
        logger.info("[teachers] created id=%s name=%s", teacher.id, teacher.name)

    def destroy(self, request, *args, **kwargs):
        instance = self.get_object()
        logger.info("[teachers] deleted id=%s name=%s", instance.id, instance.name)
        instance.delete()
        return Response({"success": True})
