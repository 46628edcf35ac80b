"""Role to permission derivation for staff users."""

from typing import FrozenSet

from config import ROLE_PERMISSIONS
from models import Permission, Role, StaffUser


def permissions_for_role(role: Role) -> FrozenSet[Permission]:
    """Return the fixed permission set granted by a role"""
    return ROLE_PERMISSIONS[role]


def has_permission(user: StaffUser, permission: Permission) -> bool:
    return user.has_permission(permission)
