# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""API dependencies for dependency injection."""

from collections.abc import Callable

from fastapi import Cookie, Depends, HTTPException, status
from sqlalchemy.orm import Session

from src.config import settings
from src.database import get_db
from src.integrations.base import EmailProvider
from src.integrations.smtp import SmtpProvider
from src.models import Admin
from src.services import auth_service, rbac_service
from src.services.rbac_service import AdminPrincipal

__all__ = [
    "get_current_admin",
    "get_current_principal",
    "get_db",
    "get_email_sender",
    "get_optional_admin",
    "require_permission",
]


def get_email_sender() -> EmailProvider:
    """Get the configured outbound email provider."""
    return SmtpProvider.from_settings(settings)


def get_optional_admin(
    db: Session = Depends(get_db),
    session: str | None = Cookie(default=None),
) -> Admin | None:
    """Get the admin behind the session cookie, if any."""
    if not session:
        return None

    session_obj = auth_service.get_session(db, session)
    if not session_obj:
        return None

    return auth_service.get_admin_by_id(db, session_obj.admin_id)


def get_current_admin(
    db: Session = Depends(get_db),
    session: str | None = Cookie(default=None),
) -> Admin:
    """Get current authenticated admin from session cookie."""
    if not session:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Not authenticated",
        )

    session_obj = auth_service.get_session(db, session)
    if not session_obj:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid or expired session",
        )

    admin = auth_service.get_admin_by_id(db, session_obj.admin_id)
    if not admin:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Admin not found",
        )

    return admin


def get_current_principal(
    admin: Admin = Depends(get_current_admin),
) -> AdminPrincipal:
    """Get the request-scoped principal of the authenticated admin."""
    return AdminPrincipal.from_admin(admin)


def require_permission(permission_code: str) -> Callable[..., AdminPrincipal]:
    """Dependency for permission-based authorization."""

    def dependency(
        principal: AdminPrincipal = Depends(get_current_principal),
    ) -> AdminPrincipal:
        if not rbac_service.has_permission(principal, permission_code):
            raise HTTPException(
                status_code=status.HTTP_403_FORBIDDEN,
                detail=f"Permission denied: {permission_code}",
            )
        return principal

    return dependency
