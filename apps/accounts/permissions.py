from rest_framework import permissions

from .models import UserRole


class IsOrganizationMember(permissions.BasePermission):
    """
    Permission: User must be authenticated and attached to an organization.
    """

    message = 'You must belong to an organization to access this resource.'

    def has_permission(self, request, view):
        user = request.user
        return bool(user and user.is_authenticated and user.organization_id)

    def has_object_permission(self, request, view, obj):
        # obj carries an organization_id (sample, session, template, ...)
        organization_id = getattr(obj, 'organization_id', None)
        return organization_id is None or organization_id == request.user.organization_id


class HasOrganizationRole(IsOrganizationMember):
    """
    Permission: Organization member holding one of `allowed_roles`.

    Use `HasOrganizationRole.for_roles(...)` to build a concrete class.
    """

    allowed_roles = ()

    def has_permission(self, request, view):
        if not super().has_permission(request, view):
            return False
        return request.user.role in self.allowed_roles

    @classmethod
    def for_roles(cls, *roles):
        names = '_'.join(role.lower() for role in roles)
        return type(
            f'HasRole_{names}',
            (cls,),
            {
                'allowed_roles': tuple(roles),
                'message': f"This action requires one of the roles: {', '.join(roles)}.",
            },
        )


IsAdmin = HasOrganizationRole.for_roles(UserRole.ADMIN)
IsAdminOrManager = HasOrganizationRole.for_roles(UserRole.ADMIN, UserRole.MANAGER)
IsCupperOrAbove = HasOrganizationRole.for_roles(UserRole.ADMIN, UserRole.MANAGER, UserRole.CUPPER)
