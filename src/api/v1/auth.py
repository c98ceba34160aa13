# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Admin authentication API endpoints."""

import logging

from fastapi import APIRouter, Cookie, Depends, HTTPException, Response, status
from sqlalchemy.orm import Session

from src.api.deps import get_current_admin, get_db, get_optional_admin
from src.config import settings
from src.models import Admin
from src.schemas.auth import (
    AdminResponse,
    CheckAuthResponse,
    LoginRequest,
    LoginResponse,
)
from src.schemas.common import MessageResponse
from src.services import auth_service
from src.services.auth_service import AdminAlreadyExistsError

logger = logging.getLogger(__name__)

SESSION_COOKIE = "session"

router = APIRouter()


@router.post(
    "/setup", response_model=MessageResponse, status_code=status.HTTP_201_CREATED
)
def setup_initial_admin(db: Session = Depends(get_db)) -> MessageResponse:
    """Create the first admin account from configured credentials."""
    try:
        admin = auth_service.create_initial_admin(db)
    except AdminAlreadyExistsError as e:
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail=str(e),
        ) from e
    return MessageResponse(message=f"Admin account {admin.username} created")


@router.post("/login", response_model=LoginResponse)
def login(
    data: LoginRequest,
    response: Response,
    db: Session = Depends(get_db),
) -> LoginResponse:
    """Login with username and password."""
    admin = auth_service.authenticate(db, data.username, data.password)

    if not admin:
        logger.warning(f"Failed login attempt for {data.username}")
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid credentials",
        )

    token = auth_service.create_session(db, admin.id)
    admin = auth_service.record_login(db, admin)

    response.set_cookie(
        key=SESSION_COOKIE,
        value=token,
        httponly=True,
        secure=settings.session_cookie_secure,
        samesite="lax",
        max_age=86400 * settings.session_expiry_days,
    )
    logger.info(f"Admin {admin.username} logged in")

    return LoginResponse(
        message="Login successful",
        admin=AdminResponse.model_validate(admin),
    )


@router.post("/logout", response_model=MessageResponse)
def logout(
    response: Response,
    db: Session = Depends(get_db),
    current_admin: Admin = Depends(get_current_admin),
    session: str | None = Cookie(default=None),
) -> MessageResponse:
    """Logout the current admin and end the session."""
    if session:
        auth_service.delete_session(db, session)
    response.delete_cookie(key=SESSION_COOKIE)
    return MessageResponse(message="Logged out successfully")


@router.get("/check-auth", response_model=CheckAuthResponse)
def check_auth(
    admin: Admin | None = Depends(get_optional_admin),
) -> CheckAuthResponse:
    """Report whether the request carries a valid admin session."""
    if admin is None:
        return CheckAuthResponse(authenticated=False, admin=None)
    return CheckAuthResponse(
        authenticated=True,
        admin=AdminResponse.model_validate(admin),
    )
