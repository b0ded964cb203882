# app/services/identity.py
"""
Registration, login and profile lookup.

Responsibilities:
- Validate credentials input and hash/verify passwords
- Enforce unique email (pre-check plus the users.email unique index)
- Issue signed access tokens embedding {id, email, role}

Credential failures always raise the same ``Unauthorized`` so callers cannot
tell an unknown email from a wrong password.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from app.core.database import is_unique_violation
from app.core.errors import Conflict, InternalError, NotFound, Unauthorized, ValidationError
from app.core.security import TokenConfig, create_access_token, hash_password, verify_password
from app.models.user import DEFAULT_ROLE, User

logger = logging.getLogger(__name__)

EMAIL_TAKEN_MESSAGE = "User already exists"
EMAIL_UNIQUE_MARKERS = ("ix_users_email", "UNIQUE constraint failed: users.email")


@dataclass(frozen=True)
class AuthResult:
    token: str
    user: User


def get_user_by_email(db: Session, email: str) -> Optional[User]:
    """Exact, case-sensitive match on the stored email."""
    return db.query(User).filter(User.email == email).first()


def get_user_by_id(db: Session, user_id: str) -> Optional[User]:
    return db.query(User).filter(User.id == user_id).first()


def issue_token(config: TokenConfig, user: User) -> str:
    return create_access_token(config, subject_id=user.id, email=user.email, role=user.role)


def register_user(
    db: Session,
    config: TokenConfig,
    *,
    email: str | None,
    password: str | None,
    name: str | None,
    role: str | None = None,
    phone: str | None = None,
    company_name: str | None = None,
    skills: list[str] | None = None,
) -> AuthResult:
    if not email or not password or not name:
        raise ValidationError("Email, password, and name are required")

    if get_user_by_email(db, email) is not None:
        raise Conflict(EMAIL_TAKEN_MESSAGE)

    # Any non-empty role is kept as given; only a missing one falls back.
    # Profile extras follow the role the client sent, not the fallback.
    user = User(
        email=email,
        name=name,
        password_hash=hash_password(password),
        role=role or DEFAULT_ROLE,
        phone=phone or None,
    )
    if role == "employer" and company_name:
        user.company_name = company_name
    if role == "employee" and skills:
        user.skills = list(skills)

    db.add(user)
    try:
        db.commit()
    except IntegrityError as exc:
        db.rollback()
        if not is_unique_violation(exc, *EMAIL_UNIQUE_MARKERS):
            logger.exception("Failed to persist new user")
            raise InternalError()
        # Lost a race with a concurrent registration for the same email.
        raise Conflict(EMAIL_TAKEN_MESSAGE)
    except SQLAlchemyError:
        db.rollback()
        logger.exception("Failed to persist new user")
        raise InternalError()
    db.refresh(user)

    logger.info("Registered user id=%s role=%s", user.id, user.role)
    return AuthResult(token=issue_token(config, user), user=user)


def authenticate_user(
    db: Session,
    config: TokenConfig,
    *,
    email: str | None,
    password: str | None,
) -> AuthResult:
    if not email or not password:
        raise ValidationError("Email and password are required")

    user = get_user_by_email(db, email)
    if user is None:
        logger.info("Login failed reason=unknown_email")
        raise Unauthorized()

    if not user.password_hash:
        logger.error("Login failed reason=missing_hash user_id=%s", user.id)
        raise Unauthorized()

    if not verify_password(password, user.password_hash):
        logger.info("Login failed reason=bad_password user_id=%s", user.id)
        raise Unauthorized()

    return AuthResult(token=issue_token(config, user), user=user)


def get_profile(db: Session, user_id: str) -> User:
    """
    Re-read the user behind a verified token. The token may outlive the
    record, so a missing user is a NotFound rather than an auth failure.
    """
    user = get_user_by_id(db, user_id)
    if user is None:
        raise NotFound("User not found")
    return user
