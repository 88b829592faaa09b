# apps/core/urls.py

from django.urls import path

from apps.core.views import AdminLoginView, AdminLogoutView, AdminStatusView

urlpatterns = [
    path("admin/login", AdminLoginView.as_view(), name="admin-login"),
    path("admin/logout", AdminLogoutView.as_view(), name="admin-logout"),
    path("admin/status", AdminStatusView.as_view(), name="admin-status"),
]
