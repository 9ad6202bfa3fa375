from events.handlers.views import (
    AdminDashboardView,
    AdminEventDetailView,
    AdminEventListView,
    AdminLoginView,
    AdminLogoutView,
    EventDetailView,
    EventListView,
)

__all__ = [
    "AdminDashboardView",
    "AdminEventDetailView",
    "AdminEventListView",
    "AdminLoginView",
    "AdminLogoutView",
    "EventDetailView",
    "EventListView",
]
