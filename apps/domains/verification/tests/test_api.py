from unittest.mock import patch

from django.core.cache import cache
from rest_framework.test import APITestCase
from rest_framework.throttling import ScopedRateThrottle

from apps.domains.verification.models import PhoneVerification


class PhoneVerificationApiTest(APITestCase):
    def setUp(self):
        cache.clear()

    @patch("apps.domains.verification.services.generate_code", return_value="123456")
    def test_send_then_verify(self, _):
        resp = self.client.post("/api/auth/phone/send", {"phone": "010-9876-5432"}, format="json")
        self.assertEqual(resp.status_code, 200)
        self.assertEqual(resp.data, {"success": True})

        resp = self.client.post(
            "/api/auth/phone/verify",
            {"phone": "01098765432", "code": "123456"},
            format="json",
        )
        self.assertEqual(resp.status_code, 200)
        self.assertEqual(resp.data, {"success": True})

    def test_send_invalid_phone(self):
        resp = self.client.post("/api/auth/phone/send", {"phone": "12345"}, format="json")
        self.assertEqual(resp.status_code, 400)
        self.assertEqual(resp.data["field"], "phone")
        self.assertFalse(PhoneVerification.objects.exists())

    def test_verify_wrong_code(self):
        with patch("apps.domains.verification.services.generate_code", return_value="123456"):
            self.client.post("/api/auth/phone/send", {"phone": "01098765432"}, format="json")

        resp = self.client.post(
            "/api/auth/phone/verify",
            {"phone": "01098765432", "code": "999999"},
            format="json",
        )
        self.assertEqual(resp.status_code, 400)
        self.assertEqual(resp.data["code"], "invalid_or_expired_code")

    def test_verify_is_throttled(self):
        rates = {"phone_send": "100/min", "phone_verify": "2/min"}
        with patch.object(ScopedRateThrottle, "THROTTLE_RATES", rates):
            for _ in range(2):
                resp = self.client.post(
                    "/api/auth/phone/verify",
                    {"phone": "01098765432", "code": "000000"},
                    format="json",
                )
                self.assertEqual(resp.status_code, 400)

            resp = self.client.post(
                "/api/auth/phone/verify",
                {"phone": "01098765432", "code": "000000"},
                format="json",
            )
        self.assertEqual(resp.status_code, 429)
        self.assertIn("error", resp.data)

    def test_send_too_long_phone(self):
        resp = self.client.post("/api/auth/phone/send", {"phone": "1" * 25}, format="json")
        self.assertEqual(resp.status_code, 400)
        self.assertEqual(resp.data["field"], "phone")
        self.assertFalse(PhoneVerification.objects.exists())
