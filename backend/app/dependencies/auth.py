# app/dependencies/auth.py
from __future__ import annotations

import logging
from typing import Callable

from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from app.auth.identity import Identity
from app.core.errors import Forbidden, InvalidToken, Unauthenticated
from app.core.security import TokenConfig, decode_access_token

logger = logging.getLogger(__name__)

bearer_scheme = HTTPBearer(auto_error=False)


def get_token_config(request: Request) -> TokenConfig:
    return request.app.state.token_config


def require_identity(
    request: Request,
    creds: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
    token_config: TokenConfig = Depends(get_token_config),
) -> Identity:
    """
    Validates:
      - Authorization: Bearer <token>
      - token signature + exp
    Attaches the resulting Identity to request.state and returns it.

    The user record is not re-read here; handlers that need fresh profile data
    look it up themselves.
    """
    if not creds or creds.scheme.lower() != "bearer" or not creds.credentials:
        raise Unauthenticated()

    try:
        claims = decode_access_token(token_config, creds.credentials)
    except InvalidToken:
        logger.info("Rejected bearer token path=%s", request.url.path)
        raise

    identity = Identity.from_claims(claims)
    request.state.identity = identity
    return identity


def require_roles(*roles: str) -> Callable:
    allowed = frozenset(roles)

    def dependency(request: Request, identity: Identity = Depends(require_identity)) -> Identity:
        if not identity.has_role(*allowed):
            logger.warning(
                "Role denied path=%s identity=%s allowed=%s",
                request.url.path,
                identity.to_debug_dict(),
                sorted(allowed),
            )
            raise Forbidden()
        return identity

    return dependency
