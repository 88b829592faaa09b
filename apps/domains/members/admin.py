from django.contrib import admin
from .models import Member


@admin.register(Member)
class MemberAdmin(admin.ModelAdmin):
    list_display = ("id", "username", "member_type", "student_name", "school", "grade", "created_at")
    list_display_links = ("id", "username")
    list_filter = ("member_type", "academy_status", "grade")
    search_fields = ("username", "student_name", "student_phone", "parent_phone")
    exclude = ("password",)
    ordering = ("-id",)
