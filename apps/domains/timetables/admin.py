from django.contrib import admin
from .models import Timetable


@admin.register(Timetable)
class TimetableAdmin(admin.ModelAdmin):
    list_display = ("id", "category", "class_name", "teacher_name", "class_time", "class_date", "created_at")
    list_display_links = ("id", "class_name")
    list_filter = ("category",)
    search_fields = ("class_name", "teacher_name", "target_school")
    ordering = ("-id",)

    def delete_model(self, request, obj):
        from .services import delete_timetable
        delete_timetable(obj.id)

    def delete_queryset(self, request, queryset):
        from .services import delete_timetable
        for timetable_id in queryset.values_list("id", flat=True):
            delete_timetable(timetable_id)
