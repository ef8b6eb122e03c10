"""
FastAPI dependencies for authentication.

Provides ``user_store`` and ``get_current_user`` dependencies that
are used across the API routes.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Optional

from fastapi import Depends, HTTPException, Request, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from database.session import get_user_store
from database.store import UserStore

logger = logging.getLogger(__name__)

_bearer_scheme = HTTPBearer(
    auto_error=False,
    scheme_name="bearerAuth",
    bearerFormat="JWT",
)


def user_store(store: UserStore = Depends(get_user_store)) -> UserStore:
    """Re-export so routes import from a single place."""
    return store


async def get_current_user(
    request: Request,
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(_bearer_scheme),
) -> Dict[str, Any]:
    """
    Extract and verify the Bearer token, returning its claims.

    A missing credential is a 401; a credential that fails verification for
    any reason is a 403. The claims are also kept on ``request.state.user``.
    """
    from auth.jwt import TokenError, verify_token

    if credentials is None or not credentials.credentials:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Unauthorized",
        )
    try:
        claims = verify_token(credentials.credentials)
    except TokenError as exc:
        logger.debug("Rejected token on %s: %s", request.url.path, exc)
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Forbidden",
        ) from exc

    request.state.user = claims
    return claims
