"""Custom DRF permissions for the sales operations API."""
from rest_framework.permissions import SAFE_METHODS, BasePermission


def _is_admin_like(user) -> bool:
    return bool(getattr(user, "is_superuser", False) or getattr(user, "role", None) == "ADMIN")


class IsAdmin(BasePermission):
    """Allow access only to employees with the ADMIN role (or superusers)."""

    def has_permission(self, request, view):
        return request.user.is_authenticated and _is_admin_like(request.user)


class IsAdminOrReadOnly(BasePermission):
    """Any authenticated user may read; writes require the ADMIN role."""

    def has_permission(self, request, view):
        if not request.user.is_authenticated:
            return False
        if request.method in SAFE_METHODS:
            return True
        return _is_admin_like(request.user)
