# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Admin authentication service."""

import logging
import uuid
from datetime import timedelta

from sqlalchemy.orm import Session

from src.config import settings
from src.models import Admin, AdminRole
from src.models.base import utcnow
from src.models.session import Session as SessionModel
from src.security import get_password_hash, verify_password

logger = logging.getLogger(__name__)


class AuthServiceError(Exception):
    """Base exception for authentication."""


class AdminAlreadyExistsError(AuthServiceError):
    """Initial setup was requested but an admin account exists."""


def has_admins(db: Session) -> bool:
    """Check if any admin account exists."""
    return db.query(Admin).count() > 0


def create_admin(
    db: Session,
    username: str,
    password: str,
    full_name: str,
    email: str,
    role: AdminRole = AdminRole.EDITOR,
) -> Admin:
    """Create an admin account with a hashed password."""
    admin = Admin(
        username=username,
        password_hash=get_password_hash(password),
        full_name=full_name,
        email=email,
        role=role,
    )
    db.add(admin)
    db.commit()
    db.refresh(admin)
    logger.info(f"Created {role.value} account {username}")
    return admin


def create_initial_admin(db: Session) -> Admin:
    """Create the first full admin from configured credentials.

    Raises:
        AdminAlreadyExistsError: If any admin account already exists.
    """
    if has_admins(db):
        raise AdminAlreadyExistsError("Admin account already exists")
    return create_admin(
        db,
        username=settings.initial_admin_username,
        password=settings.initial_admin_password,
        full_name=settings.initial_admin_full_name,
        email=settings.initial_admin_email,
        role=AdminRole.ADMIN,
    )


def authenticate(db: Session, username: str, password: str) -> Admin | None:
    """Authenticate an admin by username and password."""
    admin = db.query(Admin).filter(Admin.username == username).first()
    if not admin:
        return None
    if not verify_password(password, admin.password_hash):
        return None
    return admin


def record_login(db: Session, admin: Admin) -> Admin:
    """Stamp the admin's last login time."""
    admin.last_login = utcnow()
    db.commit()
    db.refresh(admin)
    return admin


def create_session(db: Session, admin_id: int) -> str:
    """Create a new session for an admin."""
    token = str(uuid.uuid4())
    expires_at = utcnow() + timedelta(days=settings.session_expiry_days)

    session = SessionModel(
        admin_id=admin_id,
        token=token,
        expires_at=expires_at,
    )
    db.add(session)
    db.commit()
    return token


def get_session(db: Session, token: str) -> SessionModel | None:
    """Get a valid session by token."""
    session = db.query(SessionModel).filter(SessionModel.token == token).first()
    if not session:
        return None
    if session.expires_at < utcnow():
        db.delete(session)
        db.commit()
        return None
    return session


def delete_session(db: Session, token: str) -> bool:
    """Delete a session by token."""
    session = db.query(SessionModel).filter(SessionModel.token == token).first()
    if session:
        admin_id = session.admin_id
        db.delete(session)
        db.commit()
        logger.info(f"Admin {admin_id} logged out")
        return True
    return False


def get_admin_by_id(db: Session, admin_id: int) -> Admin | None:
    """Get an admin by ID."""
    return db.query(Admin).filter(Admin.id == admin_id).first()


def get_admin_by_username(db: Session, username: str) -> Admin | None:
    """Get an admin by username."""
    return db.query(Admin).filter(Admin.username == username).first()


def cleanup_expired_sessions(db: Session) -> int:
    """Delete all expired sessions. Returns count of deleted sessions."""
    count = (
        db.query(SessionModel)
        .filter(SessionModel.expires_at < utcnow())
        .delete()
    )
    db.commit()
    return count
