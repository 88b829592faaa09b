from django.urls import path
from .views import TimetableViewSet

timetable_list = TimetableViewSet.as_view({"get": "list", "post": "create"})
timetable_detail = TimetableViewSet.as_view({
    "get": "retrieve",
    "patch": "partial_update",
    "delete": "destroy",
})

urlpatterns = [
    path("timetables", timetable_list, name="timetable-list"),
    path("timetables/<int:pk>", timetable_detail, name="timetable-detail"),
]
