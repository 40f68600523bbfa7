from rest_framework import permissions

from apps.accounts.models import UserRole
from apps.accounts.permissions import IsOrganizationMember


class CanGradeSamples(IsOrganizationMember):
    """
    Permission: Any member reads gradings; cuppers and above record them.
    Only admins and managers delete them.
    """

    message = 'Your role does not allow changing sample gradings.'

    write_roles = (UserRole.ADMIN, UserRole.MANAGER, UserRole.CUPPER)
    delete_roles = (UserRole.ADMIN, UserRole.MANAGER)

    def has_permission(self, request, view):
        if not super().has_permission(request, view):
            return False
        if request.method in permissions.SAFE_METHODS:
            return True
        if request.method == 'DELETE':
            return request.user.role in self.delete_roles
        return request.user.role in self.write_roles
