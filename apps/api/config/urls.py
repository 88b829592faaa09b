# PATH: apps/api/config/urls.py
import sys

from django.conf import settings
from django.contrib import admin
from django.urls import include, path
from drf_yasg import openapi
from drf_yasg.views import get_schema_view
from rest_framework import permissions

from apps.api.common.views import health_check

schema_view = get_schema_view(
    openapi.Info(
        title="Academy Site API",
        default_version="v1",
        description="학원 홈페이지 (회원/휴대폰 인증/수강예약/문자수신) API",
    ),
    public=True,
    permission_classes=[permissions.AllowAny],
)

urlpatterns = [
    # =========================
    # Django Admin
    # =========================
    path("django-admin/", admin.site.urls),

    # =========================
    # Health
    # =========================
    path("api/health", health_check, name="health"),

    # =========================
    # API
    # =========================
    path("api/", include("apps.api.v1.urls")),

    # =========================
    # Swagger
    # =========================
    path("swagger/", schema_view.with_ui("swagger", cache_timeout=0), name="schema-swagger-ui"),
]

# =========================
# Debug Toolbar (DEBUG only)
# =========================
if settings.DEBUG and "runserver" in sys.argv:
    import debug_toolbar
    urlpatterns += [
        path("__debug__/", include(debug_toolbar.urls)),
    ]
