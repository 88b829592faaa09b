from django.contrib import admin
from .models import Reservation


@admin.register(Reservation)
class ReservationAdmin(admin.ModelAdmin):
    list_display = ("id", "member", "timetable", "created_at")
    list_display_links = ("id", "member")
    list_filter = ("timetable__category",)
    search_fields = ("member__username", "member__student_name", "timetable__class_name")
    ordering = ("-id",)
