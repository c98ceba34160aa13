# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Admin authentication schemas."""

import datetime

from pydantic import BaseModel, Field

from src.models.enums import AdminRole
from src.schemas.common import CamelModel


class LoginRequest(BaseModel):
    """Schema for admin login."""

    username: str = Field(..., min_length=1)
    password: str = Field(..., min_length=1)


class AdminResponse(CamelModel):
    """Schema for admin account response. Never includes the password hash."""

    id: int
    username: str
    full_name: str
    email: str
    role: AdminRole
    created_at: datetime.datetime
    last_login: datetime.datetime | None


class LoginResponse(CamelModel):
    """Schema for a successful login."""

    message: str
    admin: AdminResponse


class CheckAuthResponse(CamelModel):
    """Schema for session introspection."""

    authenticated: bool
    admin: AdminResponse | None = None
