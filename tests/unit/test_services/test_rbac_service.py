# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
import pytest

from src.models import AdminRole
from src.rbac.permissions import (
    CORE_PERMISSIONS,
    PROVIDERS_READ,
    PROVIDERS_WRITE,
    RATES_READ,
    RATES_WRITE,
)
from src.services import rbac_service
from src.services.rbac_service import AdminPrincipal


def test_admin_has_every_core_permission():
    principal = AdminPrincipal(id=1, username="root", role=AdminRole.ADMIN)
    for perm in CORE_PERMISSIONS:
        assert rbac_service.has_permission(principal, perm["code"])


@pytest.mark.parametrize("role", [AdminRole.EDITOR, AdminRole.RATE_EDITOR])
def test_editors_manage_rates_but_not_providers(role):
    principal = AdminPrincipal(id=2, username="ed", role=role)

    assert rbac_service.has_permission(principal, RATES_READ)
    assert rbac_service.has_permission(principal, RATES_WRITE)
    assert rbac_service.has_permission(principal, PROVIDERS_READ)
    assert not rbac_service.has_permission(principal, PROVIDERS_WRITE)


def test_unknown_permission_denied():
    principal = AdminPrincipal(id=1, username="root", role=AdminRole.ADMIN)
    assert not rbac_service.has_permission(principal, "leads.export")


def test_principal_from_admin(editor_user):
    principal = AdminPrincipal.from_admin(editor_user)

    assert principal.id == editor_user.id
    assert principal.role == AdminRole.RATE_EDITOR
