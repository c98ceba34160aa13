# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
# src/services/rbac_service.py
from dataclasses import dataclass

from src.models import Admin, AdminRole
from src.rbac.roles import ROLE_PERMISSIONS


@dataclass(frozen=True)
class AdminPrincipal:
    """The authenticated admin of the current request."""

    id: int
    username: str
    role: AdminRole

    @classmethod
    def from_admin(cls, admin: Admin) -> "AdminPrincipal":
        return cls(id=admin.id, username=admin.username, role=admin.role)


def get_role_permissions(role: AdminRole) -> frozenset[str]:
    """Get the permission codes granted to a role."""
    return ROLE_PERMISSIONS.get(role, frozenset())


def has_permission(principal: AdminPrincipal, permission_code: str) -> bool:
    """Check if a principal's role grants a permission."""
    return permission_code in get_role_permissions(principal.role)
