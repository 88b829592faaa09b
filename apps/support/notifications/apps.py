from django.apps import AppConfig


class NotificationsConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "apps.support.notifications"
    verbose_name = "Notifications (Google Sheets)"
