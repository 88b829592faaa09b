from django.core.exceptions import PermissionDenied
from django.http import Http404
from django.test import SimpleTestCase
from rest_framework import exceptions as drf_exceptions

from apps.api.common.exceptions import api_exception_handler
from apps.core.exceptions import (
    AlreadyReserved,
    DependencyError,
    InvalidInput,
    NotFoundError,
    Unauthenticated,
)


class ApiExceptionHandlerTest(SimpleTestCase):
    def test_domain_errors(self):
        cases = [
            (InvalidInput("형식 오류", field="phone"), 400),
            (Unauthenticated(), 401),
            (AlreadyReserved(), 400),
            (NotFoundError(), 404),
            (DependencyError(), 500),
        ]
        for exc, status_code in cases:
            resp = api_exception_handler(exc, {})
            self.assertEqual(resp.status_code, status_code)
            self.assertEqual(resp.data["error"], exc.message)
            self.assertEqual(resp.data["code"], exc.code)

        resp = api_exception_handler(InvalidInput("형식 오류", field="phone"), {})
        self.assertEqual(resp.data["field"], "phone")
        self.assertNotIn("field", api_exception_handler(Unauthenticated(), {}).data)

    def test_drf_validation_error_flattened(self):
        exc = drf_exceptions.ValidationError({"name": ["필수 항목입니다."]})
        resp = api_exception_handler(exc, {})
        self.assertEqual(resp.status_code, 400)
        self.assertEqual(resp.data, {"error": "필수 항목입니다.", "field": "name"})

    def test_non_field_errors(self):
        exc = drf_exceptions.ValidationError({"non_field_errors": ["같이 입력하세요."]})
        resp = api_exception_handler(exc, {})
        self.assertEqual(resp.data, {"error": "같이 입력하세요."})

    def test_unknown_exception_left_to_middleware(self):
        self.assertIsNone(api_exception_handler(RuntimeError("boom"), {}))

    def test_django_http404_rendered_as_error(self):
        resp = api_exception_handler(Http404("No Timetable matches the given query."), {})
        self.assertEqual(resp.status_code, 404)
        self.assertEqual(resp.data, {"error": "대상을 찾을 수 없습니다."})

    def test_django_permission_denied_rendered_as_error(self):
        resp = api_exception_handler(PermissionDenied(), {})
        self.assertEqual(resp.status_code, 403)
        self.assertIn("error", resp.data)
        self.assertNotIn("detail", resp.data)
