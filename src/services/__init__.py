# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Services package."""
from src.services import (
    auth_service,
    lead_service,
    notification_service,
    provider_service,
    rate_editor_service,
    rate_service,
    rbac_service,
    seed_service,
)

__all__ = [
    "auth_service",
    "lead_service",
    "notification_service",
    "provider_service",
    "rate_editor_service",
    "rate_service",
    "rbac_service",
    "seed_service",
]
