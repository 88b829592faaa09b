"""
공통 API 뷰
"""
import logging

from django.db import connection
from django.http import JsonResponse

logger = logging.getLogger(__name__)


def health_check(request):
    """
    헬스체크 엔드포인트

    Returns:
        - 200: 데이터베이스 연결 정상
        - 503: 데이터베이스 연결 실패
    """
    try:
        with connection.cursor() as cursor:
            cursor.execute("SELECT 1")

        return JsonResponse({
            "status": "healthy",
            "service": "academy-site-api",
            "database": "connected",
        }, status=200)
    except Exception as e:
        logger.warning("[health] database check failed: %s", e)
        return JsonResponse({
            "status": "unhealthy",
            "service": "academy-site-api",
            "database": "disconnected",
            "error": str(e),
        }, status=503)
