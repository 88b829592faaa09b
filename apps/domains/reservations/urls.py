from django.urls import path

from .views import (
    AdminReservationDetailView,
    AdminReservationListView,
    MyReservationListView,
    ReservationCreateView,
)

urlpatterns = [
    path("reservations", ReservationCreateView.as_view(), name="reservation-create"),
    path("reservations/mine", MyReservationListView.as_view(), name="reservation-mine"),
    path("admin/reservations", AdminReservationListView.as_view(), name="admin-reservation-list"),
    path("admin/reservations/<int:pk>", AdminReservationDetailView.as_view(), name="admin-reservation-detail"),
]
