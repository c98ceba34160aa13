# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Main API router."""

from fastapi import APIRouter

from src.api.v1 import (
    admin_providers,
    admin_rates,
    auth,
    countries,
    exchange_rates,
    leads,
    providers,
)

api_router = APIRouter()

# Public rate data
api_router.include_router(countries.router, prefix="/countries", tags=["countries"])
api_router.include_router(providers.router, prefix="/providers", tags=["providers"])
api_router.include_router(
    exchange_rates.router, prefix="/exchange-rates", tags=["exchange-rates"]
)

# Lead capture
api_router.include_router(leads.router, prefix="/leads", tags=["leads"])

# Admin auth routes
api_router.include_router(auth.router, prefix="/admin", tags=["admin-auth"])

# Admin rate and provider management
api_router.include_router(admin_rates.router, prefix="/admin", tags=["admin-rates"])
api_router.include_router(
    admin_providers.router, prefix="/admin", tags=["admin-providers"]
)
