from django.contrib.auth.hashers import check_password
from rest_framework.test import APITestCase

from apps.domains.members.models import Member

from .factories import DEFAULT_PASSWORD, make_member, registration_payload


class RegisterApiTest(APITestCase):
    def test_register_creates_member_and_logs_in(self):
        resp = self.client.post("/api/auth/register", registration_payload(), format="json")

        self.assertEqual(resp.status_code, 201)
        self.assertTrue(resp.data["success"])
        self.assertEqual(resp.data["member"]["username"], "newuser01")
        self.assertNotIn("password", resp.data["member"])

        member = Member.objects.get(username="newuser01")
        self.assertNotEqual(member.password, "secret123")
        self.assertTrue(check_password("secret123", member.password))
        self.assertEqual(member.parent_phone, "01044445555")
        self.assertEqual(member.student_phone, "01022223333")

        me = self.client.get("/api/auth/me")
        self.assertTrue(me.data["loggedIn"])
        self.assertEqual(me.data["member"]["id"], member.id)

    def test_register_rejects_uppercase_username(self):
        resp = self.client.post(
            "/api/auth/register", registration_payload(username="AB12"), format="json"
        )
        self.assertEqual(resp.status_code, 400)
        self.assertEqual(resp.data["field"], "username")
        self.assertIn("error", resp.data)
        self.assertFalse(Member.objects.exists())

    def test_register_rejects_short_password(self):
        resp = self.client.post(
            "/api/auth/register", registration_payload(password="123"), format="json"
        )
        self.assertEqual(resp.status_code, 400)
        self.assertEqual(resp.data["field"], "password")

    def test_duplicate_username(self):
        make_member(username="newuser01")
        resp = self.client.post("/api/auth/register", registration_payload(), format="json")

        self.assertEqual(resp.status_code, 400)
        self.assertEqual(resp.data["code"], "duplicate_username")
        self.assertEqual(Member.objects.filter(username="newuser01").count(), 1)


class LoginApiTest(APITestCase):
    def setUp(self):
        self.member = make_member()

    def test_login_logout_me(self):
        resp = self.client.post(
            "/api/auth/login",
            {"username": "student01", "password": DEFAULT_PASSWORD},
            format="json",
        )
        self.assertEqual(resp.status_code, 200)
        self.assertEqual(resp.data["member"]["id"], self.member.id)

        me = self.client.get("/api/auth/me")
        self.assertEqual(
            me.data,
            {
                "loggedIn": True,
                "member": {
                    "id": self.member.id,
                    "username": "student01",
                    "member_type": "student",
                    "student_name": "홍길동",
                },
            },
        )

        self.assertEqual(self.client.post("/api/auth/logout").status_code, 200)
        self.assertEqual(self.client.get("/api/auth/me").data, {"loggedIn": False})

    def test_wrong_password(self):
        resp = self.client.post(
            "/api/auth/login",
            {"username": "student01", "password": "wrong-password"},
            format="json",
        )
        self.assertEqual(resp.status_code, 401)
        self.assertEqual(resp.data["code"], "invalid_credentials")

    def test_unknown_username_same_error(self):
        resp = self.client.post(
            "/api/auth/login",
            {"username": "nobody99", "password": DEFAULT_PASSWORD},
            format="json",
        )
        self.assertEqual(resp.status_code, 401)
        self.assertEqual(resp.data["code"], "invalid_credentials")

    def test_logout_without_session_is_ok(self):
        resp = self.client.post("/api/auth/logout")
        self.assertEqual(resp.status_code, 200)
        self.assertEqual(resp.data, {"success": True})


class CheckUsernameApiTest(APITestCase):
    def test_available(self):
        resp = self.client.get("/api/auth/check-username", {"username": "freename1"})
        self.assertEqual(resp.status_code, 200)
        self.assertTrue(resp.data["available"])

    def test_taken(self):
        make_member(username="taken001")
        resp = self.client.get("/api/auth/check-username", {"username": "taken001"})
        self.assertFalse(resp.data["available"])

    def test_bad_format(self):
        resp = self.client.get("/api/auth/check-username", {"username": "AB"})
        self.assertEqual(resp.status_code, 400)
        self.assertEqual(resp.data["field"], "username")


class RegisterLengthApiTest(APITestCase):
    def test_over_long_school_is_400(self):
        resp = self.client.post(
            "/api/auth/register", registration_payload(school="학" * 101), format="json"
        )
        self.assertEqual(resp.status_code, 400)
        self.assertEqual(resp.data["field"], "school")
        self.assertFalse(Member.objects.exists())
