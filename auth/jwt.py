"""
JWT-style token creation and verification.

Tokens are base64-encoded JSON payloads signed with HMAC-SHA256.
Secret key is loaded from ``config.jwt_secret`` (env var: ``JWT_SECRET``).
"""

from __future__ import annotations

import binascii
import hashlib
import hmac
import json
import time
from base64 import b64decode, b64encode
from typing import Any, Dict, Optional

from config.settings import config


class TokenError(Exception):
    """Base class for every reason a token is refused."""


class MalformedTokenError(TokenError):
    pass


class InvalidSignatureError(TokenError):
    pass


class TokenExpiredError(TokenError):
    pass


def _sign(raw: bytes, secret: str) -> str:
    return hmac.new(secret.encode(), raw, hashlib.sha256).hexdigest()


def create_token(
    claims: Dict[str, Any],
    secret: Optional[str] = None,
    expiry_seconds: Optional[int] = None,
) -> str:
    """Create a signed token carrying ``claims`` plus ``iat`` and ``exp``."""
    secret = config.jwt_secret if secret is None else secret
    if expiry_seconds is None:
        expiry_seconds = config.jwt_expiry_seconds

    now = int(time.time())
    payload = dict(claims)
    payload.update({"iat": now, "exp": now + expiry_seconds})
    raw = json.dumps(payload).encode()
    return b64encode(raw).decode() + "." + _sign(raw, secret)


def verify_token(token: str, secret: Optional[str] = None) -> Dict[str, Any]:
    """
    Verify token and return its claims.

    Raises ``MalformedTokenError``, ``InvalidSignatureError`` or
    ``TokenExpiredError``; all three are ``TokenError``.
    """
    secret = config.jwt_secret if secret is None else secret

    parts = token.split(".", 1)
    if len(parts) != 2:
        raise MalformedTokenError("bad format")
    try:
        raw = b64decode(parts[0], validate=True)
    except (binascii.Error, ValueError) as exc:
        raise MalformedTokenError("bad encoding") from exc

    if not hmac.compare_digest(parts[1].encode(), _sign(raw, secret).encode()):
        raise InvalidSignatureError("bad signature")

    try:
        payload = json.loads(raw)
    except ValueError as exc:
        raise MalformedTokenError("bad payload") from exc
    if not isinstance(payload, dict) or not isinstance(payload.get("exp"), int):
        raise MalformedTokenError("missing expiry")

    if payload["exp"] < time.time():
        raise TokenExpiredError("token expired")
    return payload
