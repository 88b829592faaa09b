from unittest.mock import patch

from rest_framework.test import APITestCase

from apps.domains.subscriptions.models import SmsSubscription

ADMIN_PASSWORD = "admin-test-password"


class SmsSubscriptionApiTest(APITestCase):
    def test_subscribe(self):
        with patch("apps.domains.subscriptions.services.notify_subscription") as notify:
            resp = self.client.post(
                "/api/sms-subscriptions",
                {"name": "김학부모", "phone": "010-5555-6666"},
                format="json",
            )

        self.assertEqual(resp.status_code, 201)
        self.assertTrue(resp.data["success"])
        self.assertEqual(resp.data["subscription"]["phone"], "01055556666")
        notify.assert_called_once_with({"name": "김학부모", "phone": "01055556666"})

    def test_invalid_phone(self):
        resp = self.client.post("/api/sms-subscriptions", {"phone": "555"}, format="json")
        self.assertEqual(resp.status_code, 400)
        self.assertEqual(resp.data["field"], "phone")
        self.assertFalse(SmsSubscription.objects.exists())

    def test_too_long_phone(self):
        resp = self.client.post("/api/sms-subscriptions", {"phone": "0" * 21}, format="json")
        self.assertEqual(resp.status_code, 400)
        self.assertEqual(resp.data["field"], "phone")
        self.assertFalse(SmsSubscription.objects.exists())

    def test_sheet_row_written_after_commit(self):
        with patch("apps.support.notifications.sheets.append_row") as append_row:
            with self.captureOnCommitCallbacks(execute=True):
                self.client.post("/api/sms-subscriptions", {"phone": "01055556666"}, format="json")

        row = append_row.call_args[0][0]
        self.assertEqual(row[1], "문자수신")
        self.assertEqual(row[2], "-")
        self.assertEqual(row[5], "01055556666")

    def test_admin_list_and_delete(self):
        subscription = SmsSubscription.objects.create(name="a", phone="01011110000")
        self.assertEqual(self.client.get("/api/admin/sms-subscriptions").status_code, 401)

        self.client.post("/api/admin/login", {"password": ADMIN_PASSWORD}, format="json")
        resp = self.client.get("/api/admin/sms-subscriptions")
        self.assertEqual(resp.status_code, 200)
        self.assertEqual(resp.data[0]["id"], subscription.id)

        resp = self.client.delete(f"/api/admin/sms-subscriptions/{subscription.id}")
        self.assertEqual(resp.data, {"success": True})
        self.assertFalse(SmsSubscription.objects.exists())
