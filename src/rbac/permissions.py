# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
# src/rbac/permissions.py
CORE_PERMISSIONS = [
    {"code": "rates.read", "description": "View all exchange rate rows"},
    {"code": "rates.write", "description": "Create and edit exchange rates"},
    {"code": "providers.read", "description": "View all providers"},
    {"code": "providers.write", "description": "Create and edit providers"},
]

RATES_READ = "rates.read"
RATES_WRITE = "rates.write"
PROVIDERS_READ = "providers.read"
PROVIDERS_WRITE = "providers.write"
