# apps/api/common/exceptions.py
# DRF EXCEPTION_HANDLER — 모든 실패 응답을 {"error": "..."} 한 가지 모양으로 통일.
from __future__ import annotations

import logging

from django.core.exceptions import PermissionDenied
from django.http import Http404
from rest_framework import exceptions as drf_exceptions
from rest_framework.response import Response
from rest_framework.views import exception_handler as drf_exception_handler

from apps.core.exceptions import DependencyError, DomainError

logger = logging.getLogger(__name__)


def _first_message(detail):
    """DRF ValidationError.detail (dict/list/str 중첩) → (field, message)."""
    if isinstance(detail, dict):
        for field, value in detail.items():
            _, message = _first_message(value)
            if message:
                return (None if field == "non_field_errors" else str(field)), message
        return None, ""
    if isinstance(detail, (list, tuple)):
        for value in detail:
            field, message = _first_message(value)
            if message:
                return field, message
        return None, ""
    return None, str(detail)


def api_exception_handler(exc, context):
    if isinstance(exc, DomainError):
        if isinstance(exc, DependencyError):
            logger.error("[api] dependency failure code=%s message=%s", exc.code, exc.message)
        body = {"error": exc.message, "code": exc.code}
        if exc.field:
            body["field"] = exc.field
        return Response(body, status=exc.http_status)

    # DRF 가 내부에서 변환하는 Django 예외도 같은 모양으로
    if isinstance(exc, Http404):
        exc = drf_exceptions.NotFound("대상을 찾을 수 없습니다.")
    elif isinstance(exc, PermissionDenied):
        exc = drf_exceptions.PermissionDenied()

    response = drf_exception_handler(exc, context)
    if response is None:
        # UnhandledExceptionMiddleware 가 500 처리
        return None

    if isinstance(exc, drf_exceptions.APIException):
        field, message = _first_message(exc.detail)
        body = {"error": message or "요청을 처리할 수 없습니다."}
        if field:
            body["field"] = field
        if isinstance(exc, drf_exceptions.Throttled):
            body["error"] = "요청이 너무 많습니다. 잠시 후 다시 시도해 주세요."
        response.data = body
    return response
