# app/core/security.py
from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Any

from jose import JWTError, jwt
from passlib.context import CryptContext

from app.core.config import Settings, settings
from app.core.errors import InvalidToken

logger = logging.getLogger(__name__)

pwd_context = CryptContext(
    schemes=["bcrypt"],
    deprecated="auto",
    bcrypt__rounds=settings.BCRYPT_ROUNDS,
)


# -------------------------
# Password hashing
# -------------------------
def hash_password(password: str) -> str:
    return pwd_context.hash(password)


def verify_password(password: str, password_hash: str | None) -> bool:
    if not password_hash:
        return False
    try:
        return pwd_context.verify(password, password_hash)
    except ValueError:
        # Stored value is not a recognizable hash.
        logger.error("Stored password hash could not be identified")
        return False


# -------------------------
# Token configuration
# -------------------------
@dataclass(frozen=True)
class TokenConfig:
    """
    Signing parameters shared by token issuance and verification.

    Built once at startup and handed to both sides, so the secret used to sign
    is always the one used to verify.
    """

    secret: str
    algorithm: str = "HS256"
    expire_minutes: int = 7 * 24 * 60

    @classmethod
    def from_settings(cls, s: Settings) -> TokenConfig:
        if not s.JWT_SECRET or not s.JWT_SECRET.strip():
            raise RuntimeError("JWT_SECRET must be set (auth is required).")
        return cls(
            secret=s.JWT_SECRET,
            algorithm=s.JWT_ALGORITHM,
            expire_minutes=s.ACCESS_TOKEN_EXPIRE_MINUTES,
        )

    @property
    def lifetime(self) -> timedelta:
        return timedelta(minutes=self.expire_minutes)


@dataclass(frozen=True)
class TokenClaims:
    subject_id: str
    email: str
    role: str
    issued_at: int
    expires_at: int

    def to_payload(self) -> dict[str, Any]:
        return {
            "sub": self.subject_id,
            "email": self.email,
            "role": self.role,
            "iat": self.issued_at,
            "exp": self.expires_at,
        }


# -------------------------
# JWT helpers
# -------------------------
def _now_utc() -> datetime:
    return datetime.now(timezone.utc)


def build_claims(
    config: TokenConfig,
    *,
    subject_id: str,
    email: str,
    role: str,
    now: datetime | None = None,
) -> TokenClaims:
    now = now or _now_utc()
    exp = now + config.lifetime
    return TokenClaims(
        subject_id=str(subject_id),
        email=email,
        role=role,
        issued_at=int(now.timestamp()),
        expires_at=int(exp.timestamp()),
    )


def encode_token(config: TokenConfig, claims: TokenClaims) -> str:
    return jwt.encode(claims.to_payload(), config.secret, algorithm=config.algorithm)


def create_access_token(
    config: TokenConfig,
    *,
    subject_id: str,
    email: str,
    role: str,
    now: datetime | None = None,
) -> str:
    """
    Access token used for API auth: Authorization: Bearer <token>
    """
    claims = build_claims(config, subject_id=subject_id, email=email, role=role, now=now)
    return encode_token(config, claims)


def decode_access_token(config: TokenConfig, token: str, *, now: datetime | None = None) -> TokenClaims:
    """
    Verify signature and expiry and return the claims.

    Every failure (malformed, bad signature, wrong algorithm, missing claim,
    expired) raises the same InvalidToken.
    """
    if not token:
        raise InvalidToken()

    try:
        # Expiry is checked below against the supplied clock.
        payload = jwt.decode(
            token,
            config.secret,
            algorithms=[config.algorithm],
            options={"verify_exp": False},
        )
    except JWTError:
        raise InvalidToken()

    try:
        claims = TokenClaims(
            subject_id=_require_str(payload, "sub"),
            email=_require_str(payload, "email"),
            role=_require_str(payload, "role"),
            issued_at=_require_int(payload, "iat"),
            expires_at=_require_int(payload, "exp"),
        )
    except ValueError:
        raise InvalidToken()

    current = int((now or _now_utc()).timestamp())
    if current >= claims.expires_at:
        raise InvalidToken()

    return claims


def _require_str(payload: dict[str, Any], key: str) -> str:
    value = payload.get(key)
    if not isinstance(value, str) or not value:
        raise ValueError(f"Token missing '{key}'")
    return value


def _require_int(payload: dict[str, Any], key: str) -> int:
    value = payload.get(key)
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"Token missing '{key}'")
    return value
