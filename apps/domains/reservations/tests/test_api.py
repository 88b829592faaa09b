from unittest.mock import patch

from rest_framework.test import APITestCase

from apps.domains.members.tests.factories import DEFAULT_PASSWORD, make_member
from apps.domains.reservations.models import Reservation
from apps.domains.timetables.models import Timetable

ADMIN_PASSWORD = "admin-test-password"


class ReservationApiTest(APITestCase):
    def setUp(self):
        self.member = make_member(username="student01")
        self.timetable = Timetable.objects.create(
            category="고등관",
            class_name="고2 수학 심화",
            class_time="월/수 19:00",
            class_date="3월 4일 개강",
            teacher_name="이강사",
        )

    def _login(self, username="student01"):
        resp = self.client.post(
            "/api/auth/login",
            {"username": username, "password": DEFAULT_PASSWORD},
            format="json",
        )
        self.assertEqual(resp.status_code, 200)

    def _admin_login(self):
        resp = self.client.post("/api/admin/login", {"password": ADMIN_PASSWORD}, format="json")
        self.assertEqual(resp.status_code, 200)

    def test_requires_login(self):
        resp = self.client.post(
            "/api/reservations", {"timetable_id": self.timetable.id}, format="json"
        )
        self.assertEqual(resp.status_code, 401)
        self.assertIn("error", resp.data)
        self.assertFalse(Reservation.objects.exists())

    def test_reserve_once(self):
        self._login()

        resp = self.client.post(
            "/api/reservations", {"timetable_id": self.timetable.id}, format="json"
        )
        self.assertEqual(resp.status_code, 201)
        self.assertEqual(resp.data["user_id"], self.member.id)
        self.assertEqual(resp.data["timetable_id"], self.timetable.id)
        self.assertEqual(resp.data["class_name"], "고2 수학 심화")

        resp = self.client.post(
            "/api/reservations", {"timetable_id": self.timetable.id}, format="json"
        )
        self.assertEqual(resp.status_code, 400)
        self.assertEqual(resp.data["code"], "already_reserved")
        self.assertEqual(Reservation.objects.count(), 1)

    def test_unknown_timetable(self):
        self._login()
        resp = self.client.post("/api/reservations", {"timetable_id": 99999}, format="json")
        self.assertEqual(resp.status_code, 404)

    def test_missing_timetable_id(self):
        self._login()
        resp = self.client.post("/api/reservations", {}, format="json")
        self.assertEqual(resp.status_code, 400)
        self.assertEqual(resp.data["field"], "timetable_id")

    def test_sink_failure_does_not_affect_response(self):
        self._login()
        with patch(
            "apps.support.notifications.sheets.append_row",
            side_effect=RuntimeError("sheets down"),
        ) as append_row:
            with self.captureOnCommitCallbacks(execute=True) as callbacks:
                resp = self.client.post(
                    "/api/reservations", {"timetable_id": self.timetable.id}, format="json"
                )

        self.assertEqual(resp.status_code, 201)
        self.assertEqual(len(callbacks), 1)
        append_row.assert_called_once()
        row = append_row.call_args[0][0]
        self.assertEqual(row[1], "수강예약")
        self.assertEqual(row[2], "홍길동")
        self.assertEqual(row[5], "01011112222")
        self.assertEqual(row[6], "고2 수학 심화")
        self.assertEqual(Reservation.objects.count(), 1)

    def test_my_reservations(self):
        other = make_member(username="student02")
        Reservation.objects.create(member=other, timetable=self.timetable)
        self._login()
        self.client.post("/api/reservations", {"timetable_id": self.timetable.id}, format="json")

        resp = self.client.get("/api/reservations/mine")
        self.assertEqual(resp.status_code, 200)
        self.assertEqual(len(resp.data), 1)
        self.assertEqual(resp.data[0]["user_id"], self.member.id)

    def test_admin_list_and_delete(self):
        reservation = Reservation.objects.create(member=self.member, timetable=self.timetable)

        self.assertEqual(self.client.get("/api/admin/reservations").status_code, 401)

        self._admin_login()
        resp = self.client.get("/api/admin/reservations")
        self.assertEqual(resp.status_code, 200)
        self.assertEqual(len(resp.data), 1)
        row = resp.data[0]
        self.assertEqual(row["username"], "student01")
        self.assertEqual(row["student_name"], "홍길동")
        self.assertEqual(row["parent_phone"], "01033334444")
        self.assertEqual(row["category"], "고등관")
        self.assertEqual(row["teacher_name"], "이강사")

        resp = self.client.delete(f"/api/admin/reservations/{reservation.id}")
        self.assertEqual(resp.status_code, 200)
        self.assertEqual(resp.data, {"success": True})
        self.assertFalse(Reservation.objects.exists())

        # 없는 id 도 성공
        resp = self.client.delete(f"/api/admin/reservations/{reservation.id}")
        self.assertEqual(resp.status_code, 200)

    def test_member_session_is_not_admin(self):
        self._login()
        self.assertEqual(self.client.get("/api/admin/reservations").status_code, 401)
