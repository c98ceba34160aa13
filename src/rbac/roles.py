# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
# src/rbac/roles.py
from src.models.enums import AdminRole

from .permissions import (
    CORE_PERMISSIONS,
    PROVIDERS_READ,
    RATES_READ,
    RATES_WRITE,
)

# Admin always gets all core permissions
ADMIN_PERMISSIONS = frozenset(p["code"] for p in CORE_PERMISSIONS)

# Editors may look at providers but only change rates
EDITOR_PERMISSIONS = frozenset({RATES_READ, RATES_WRITE, PROVIDERS_READ})

ROLE_PERMISSIONS: dict[AdminRole, frozenset[str]] = {
    AdminRole.ADMIN: ADMIN_PERMISSIONS,
    AdminRole.EDITOR: EDITOR_PERMISSIONS,
    AdminRole.RATE_EDITOR: EDITOR_PERMISSIONS,
}
