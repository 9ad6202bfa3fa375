from django.urls import path

from events.handlers import (
    AdminDashboardView,
    AdminEventDetailView,
    AdminEventListView,
    AdminLoginView,
    AdminLogoutView,
    EventDetailView,
    EventListView,
)

urlpatterns = [
    path("events", EventListView.as_view(), name="event-list"),
    path("events/<str:event_id>", EventDetailView.as_view(), name="event-detail"),
    path("admin/login", AdminLoginView.as_view(), name="admin-login"),
    path("admin/logout", AdminLogoutView.as_view(), name="admin-logout"),
    path("admin/dashboard", AdminDashboardView.as_view(), name="admin-dashboard"),
    path("admin/events", AdminEventListView.as_view(), name="admin-event-list"),
    path(
        "admin/events/<str:event_id>",
        AdminEventDetailView.as_view(),
        name="admin-event-detail",
    ),
]
