# apps/support/notifications/sheets.py
"""
Google Sheets 접수현황 기록 — gspread + 서비스 계정

- GOOGLE_SHEET_ID 가 있으면 그 스프레드시트를 사용
- 없으면 최초 1회 새로 만들고 id 를 프로세스 메모리에 캐시 (로그에 URL 출력)
- 서비스 계정 정보: GOOGLE_SERVICE_ACCOUNT_JSON(문자열) 또는 GOOGLE_SERVICE_ACCOUNT_FILE(경로)
"""
from __future__ import annotations

import json
import logging
from typing import Any, Optional

import gspread
from django.conf import settings
from django.utils import timezone
from google.oauth2.service_account import Credentials

from apps.core.exceptions import DependencyError

logger = logging.getLogger(__name__)

SCOPE = [
    "https://www.googleapis.com/auth/spreadsheets",
    "https://www.googleapis.com/auth/drive",
]

SHEET_TITLE = "접수현황"
HEADERS = ["신청일시", "구분", "학생이름", "학교", "학년", "연락처", "신청수업명"]
TABLE_RANGE = "A:G"

KIND_RESERVATION = "수강예약"
KIND_SMS = "문자수신"

_cached_spreadsheet_id: Optional[str] = None


def _load_credentials() -> Credentials:
    info_json = getattr(settings, "GOOGLE_SERVICE_ACCOUNT_JSON", "") or ""
    info_file = getattr(settings, "GOOGLE_SERVICE_ACCOUNT_FILE", "") or ""

    if info_json:
        try:
            info = json.loads(info_json)
        except ValueError as e:
            raise DependencyError(
                "GOOGLE_SERVICE_ACCOUNT_JSON 형식이 올바르지 않습니다.",
                code="sheets_bad_credentials",
            ) from e
        return Credentials.from_service_account_info(info, scopes=SCOPE)

    if info_file:
        return Credentials.from_service_account_file(info_file, scopes=SCOPE)

    raise DependencyError("Google 서비스 계정이 설정되지 않았습니다.", code="sheets_not_configured")


def get_client() -> gspread.Client:
    return gspread.authorize(_load_credentials())


def _spreadsheet_id(client: gspread.Client) -> str:
    global _cached_spreadsheet_id
    if _cached_spreadsheet_id:
        return _cached_spreadsheet_id

    configured = getattr(settings, "GOOGLE_SHEET_ID", "") or ""
    if configured:
        _cached_spreadsheet_id = configured
        return configured

    title = getattr(settings, "GOOGLE_SPREADSHEET_TITLE", "") or "학원 접수현황"
    spreadsheet = client.create(title)
    worksheet = spreadsheet.sheet1
    worksheet.update_title(SHEET_TITLE)
    worksheet.append_row(HEADERS, value_input_option="RAW")

    _cached_spreadsheet_id = spreadsheet.id
    logger.info(
        "[sheets] spreadsheet created: https://docs.google.com/spreadsheets/d/%s",
        spreadsheet.id,
    )
    return spreadsheet.id


def get_worksheet(client: gspread.Client) -> gspread.Worksheet:
    spreadsheet = client.open_by_key(_spreadsheet_id(client))
    try:
        return spreadsheet.worksheet(SHEET_TITLE)
    except gspread.WorksheetNotFound:
        worksheet = spreadsheet.add_worksheet(title=SHEET_TITLE, rows=1000, cols=len(HEADERS))
        worksheet.append_row(HEADERS, value_input_option="RAW")
        logger.info("[sheets] worksheet created title=%s", SHEET_TITLE)
        return worksheet


def format_timestamp(value=None) -> str:
    return timezone.localtime(value or timezone.now()).strftime("%Y-%m-%d %H:%M")


def _cell(payload: dict[str, Any], key: str) -> str:
    value = payload.get(key)
    return str(value).strip() if value not in (None, "") else "-"


def reservation_row(payload: dict[str, Any]) -> list[str]:
    return [
        format_timestamp(),
        KIND_RESERVATION,
        _cell(payload, "student_name"),
        _cell(payload, "school"),
        _cell(payload, "grade"),
        _cell(payload, "phone"),
        _cell(payload, "class_name"),
    ]


def subscription_row(payload: dict[str, Any]) -> list[str]:
    return [
        format_timestamp(),
        KIND_SMS,
        _cell(payload, "name"),
        "-",
        "-",
        _cell(payload, "phone"),
        "-",
    ]


def append_row(values: list[str]) -> None:
    worksheet = get_worksheet(get_client())
    worksheet.append_row(values, value_input_option="RAW", table_range=TABLE_RANGE)
