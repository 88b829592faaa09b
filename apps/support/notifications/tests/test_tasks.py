from unittest.mock import MagicMock, patch

import gspread
from django.test import SimpleTestCase, TestCase, override_settings

from apps.support.notifications import sheets, tasks
from apps.support.notifications.services import CeleryNotificationSink

RESERVATION = {
    "student_name": "홍길동",
    "school": "한빛고",
    "grade": "",
    "phone": "01011112222",
    "class_name": "고2 수학",
}


class SheetRowTest(SimpleTestCase):
    @patch("apps.support.notifications.sheets.format_timestamp", return_value="2026-03-02 10:00")
    def test_reservation_row(self, _):
        self.assertEqual(
            sheets.reservation_row(RESERVATION),
            ["2026-03-02 10:00", "수강예약", "홍길동", "한빛고", "-", "01011112222", "고2 수학"],
        )

    @patch("apps.support.notifications.sheets.format_timestamp", return_value="2026-03-02 10:00")
    def test_subscription_row(self, _):
        self.assertEqual(
            sheets.subscription_row({"name": "", "phone": "01099998888"}),
            ["2026-03-02 10:00", "문자수신", "-", "-", "-", "01099998888", "-"],
        )


class AppendTaskTest(SimpleTestCase):
    def test_missing_credentials_skipped(self):
        result = tasks.append_reservation_row(RESERVATION)
        self.assertEqual(result, {"status": "skipped", "reason": "sheets_not_configured"})

    @patch("apps.support.notifications.sheets.append_row", side_effect=RuntimeError("quota"))
    def test_errors_are_swallowed(self, _):
        with self.assertLogs("apps.support.notifications.tasks", level="ERROR"):
            result = tasks.append_subscription_row({"phone": "01099998888"})
        self.assertEqual(result["status"], "error")

    @patch("apps.support.notifications.sheets.append_row")
    def test_ok(self, append_row):
        self.assertEqual(tasks.append_reservation_row(RESERVATION), {"status": "ok"})
        append_row.assert_called_once()


@override_settings(GOOGLE_SHEET_ID="sheet-123")
class WorksheetTest(SimpleTestCase):
    def setUp(self):
        patcher = patch.object(sheets, "_cached_spreadsheet_id", None)
        patcher.start()
        self.addCleanup(patcher.stop)

    def test_existing_worksheet(self):
        client = MagicMock()
        worksheet = client.open_by_key.return_value.worksheet.return_value

        self.assertIs(sheets.get_worksheet(client), worksheet)
        client.open_by_key.assert_called_once_with("sheet-123")

    def test_missing_worksheet_created_with_headers(self):
        client = MagicMock()
        spreadsheet = client.open_by_key.return_value
        spreadsheet.worksheet.side_effect = gspread.WorksheetNotFound("접수현황")

        worksheet = sheets.get_worksheet(client)

        self.assertIs(worksheet, spreadsheet.add_worksheet.return_value)
        worksheet.append_row.assert_called_once_with(sheets.HEADERS, value_input_option="RAW")

    @override_settings(GOOGLE_SHEET_ID="")
    def test_spreadsheet_created_once_and_cached(self):
        client = MagicMock()
        client.create.return_value.id = "new-sheet"

        self.assertEqual(sheets._spreadsheet_id(client), "new-sheet")
        self.assertEqual(sheets._spreadsheet_id(client), "new-sheet")
        client.create.assert_called_once()

    @patch("apps.support.notifications.sheets.get_client")
    def test_append_row(self, get_client):
        worksheet = get_client.return_value.open_by_key.return_value.worksheet.return_value
        sheets.append_row(["a"] * 7)
        worksheet.append_row.assert_called_once_with(
            ["a"] * 7, value_input_option="RAW", table_range="A:G"
        )


class NotificationSinkTest(TestCase):
    @patch("apps.support.notifications.tasks.append_reservation_row.delay")
    def test_dispatch_after_commit(self, delay):
        sink = CeleryNotificationSink()
        with self.captureOnCommitCallbacks(execute=True):
            sink.notify_reservation(RESERVATION)
            delay.assert_not_called()
        delay.assert_called_once_with(RESERVATION)

    @patch(
        "apps.support.notifications.tasks.append_subscription_row.delay",
        side_effect=ConnectionError("broker down"),
    )
    def test_enqueue_failure_logged(self, _):
        sink = CeleryNotificationSink()
        with self.assertLogs("apps.support.notifications.services", level="ERROR"):
            with self.captureOnCommitCallbacks(execute=True):
                sink.notify_subscription({"phone": "01011112222"})

    @override_settings(NOTIFICATIONS_ENABLED=False)
    @patch("apps.support.notifications.tasks.append_reservation_row.delay")
    def test_disabled(self, delay):
        with self.captureOnCommitCallbacks(execute=True) as callbacks:
            CeleryNotificationSink().notify_reservation(RESERVATION)
        self.assertEqual(callbacks, [])
        delay.assert_not_called()

    @patch("apps.support.notifications.sheets.append_row", side_effect=RuntimeError("quota"))
    def test_eager_sheet_failure_stays_in_task(self, append_row):
        # eager 설정에서는 커밋 직후 같은 스레드에서 실행된다
        with self.assertLogs("apps.support.notifications.tasks", level="ERROR"):
            with self.captureOnCommitCallbacks(execute=True):
                CeleryNotificationSink().notify_reservation(RESERVATION)
        append_row.assert_called_once()
