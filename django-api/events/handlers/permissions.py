from rest_framework.permissions import BasePermission

from events.services.admin_auth import is_admin


class IsAdminSession(BasePermission):
    """Allow requests whose session carries the admin console flag."""

    message = "Admin login required"

    def has_permission(self, request, view) -> bool:
        return is_admin(request.session)
