from django.contrib import admin
from .models import Teacher


@admin.register(Teacher)
class TeacherAdmin(admin.ModelAdmin):
    list_display = ("id", "name", "subject", "division", "created_at")
    search_fields = ("name", "subject")
    list_filter = ("subject", "division")
