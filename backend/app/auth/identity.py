# app/auth/identity.py
"""
Canonical authenticated identity model.

The access gate builds an Identity from verified token claims and stores it on
``request.state.identity``. Downstream handlers read the caller's id and role
from it instead of inspecting raw JWTs, and never from client-supplied ids.

The Identity object is INTERNAL ONLY and should not be returned directly
to clients.
"""
from __future__ import annotations

from dataclasses import dataclass

from app.core.security import TokenClaims


@dataclass(frozen=True)
class Identity:
    """
    Canonical representation of an authenticated (or unauthenticated) caller.

    Attributes:
        user_id: Id of the user the token was issued to.
        email: Email embedded in the token at issuance.
        role: Role embedded in the token at issuance (``employee``/``employer``
              or whatever was supplied at registration).
        is_authenticated: True if a valid token was presented.
        expires_at: Token expiry as a unix timestamp.
    """

    user_id: str | None = None
    email: str | None = None
    role: str | None = None
    is_authenticated: bool = False
    expires_at: int | None = None

    @classmethod
    def unauthenticated(cls) -> Identity:
        """Create an identity representing an unauthenticated request."""
        return cls()

    @classmethod
    def from_claims(cls, claims: TokenClaims) -> Identity:
        return cls(
            user_id=claims.subject_id,
            email=claims.email,
            role=claims.role,
            is_authenticated=True,
            expires_at=claims.expires_at,
        )

    def has_role(self, *roles: str) -> bool:
        return self.is_authenticated and self.role in roles

    def to_debug_dict(self) -> dict:
        return {
            "user_id": self.user_id,
            "email": self.email,
            "role": self.role,
            "is_authenticated": self.is_authenticated,
        }
