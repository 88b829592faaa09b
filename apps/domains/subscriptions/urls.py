from django.urls import path

from .views import (
    AdminSmsSubscriptionDetailView,
    AdminSmsSubscriptionListView,
    SmsSubscriptionCreateView,
)

urlpatterns = [
    path("sms-subscriptions", SmsSubscriptionCreateView.as_view(), name="sms-subscription-create"),
    path("admin/sms-subscriptions", AdminSmsSubscriptionListView.as_view(), name="admin-sms-subscription-list"),
    path(
        "admin/sms-subscriptions/<int:pk>",
        AdminSmsSubscriptionDetailView.as_view(),
        name="admin-sms-subscription-detail",
    ),
]
