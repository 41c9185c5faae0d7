"""
Permission classes gating the record endpoints on a bearer token.
"""
from django.conf import settings
from rest_framework.permissions import BasePermission

from .errors import TokenRequired


class HasBearerToken(BasePermission):
    """A verified bearer token must accompany the request.

    A missing token is a 403; an invalid one has already been rejected
    with a 401 by the authentication class.
    """
    def has_permission(self, request, view) -> bool:  # type: ignore[override]
        if request.auth is None:
            raise TokenRequired()
        return True


class StaffListAccess(HasBearerToken):
    """Token required unless ``STAFF_LIST_PUBLIC`` opens the list."""
    def has_permission(self, request, view) -> bool:  # type: ignore[override]
        if getattr(settings, 'STAFF_LIST_PUBLIC', False):
            return True
        return super().has_permission(request, view)
