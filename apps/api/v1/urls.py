# PATH: apps/api/v1/urls.py
from django.urls import include, path

urlpatterns = [
    # =========================
    # Auth (회원 + 휴대폰 인증)
    # =========================
    path("", include("apps.domains.members.urls")),
    path("", include("apps.domains.verification.urls")),

    # =========================
    # Admin session
    # =========================
    path("", include("apps.core.urls")),

    # =========================
    # Domain APIs
    # =========================
    path("", include("apps.domains.teachers.urls")),
    path("", include("apps.domains.timetables.urls")),
    path("", include("apps.domains.reservations.urls")),
    path("", include("apps.domains.subscriptions.urls")),
]
