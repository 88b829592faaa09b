from django.contrib import admin
from .models import SmsSubscription


@admin.register(SmsSubscription)
class SmsSubscriptionAdmin(admin.ModelAdmin):
    list_display = ("id", "name", "phone", "created_at")
    search_fields = ("name", "phone")
    ordering = ("-id",)
