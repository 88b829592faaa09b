from django.contrib import admin
from .models import PhoneVerification


@admin.register(PhoneVerification)
class PhoneVerificationAdmin(admin.ModelAdmin):
    list_display = ("id", "phone", "verified", "expires_at", "created_at")
    list_filter = ("verified",)
    search_fields = ("phone",)
    readonly_fields = ("phone", "code", "expires_at", "verified", "created_at")
    ordering = ("-id",)
