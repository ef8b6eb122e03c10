"""
Pydantic schemas for the QA Learning API.

Fields that were never validated stay optional: an absent
``username`` or ``name`` is stored as ``null`` rather than rejected.
"""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel


# ═══════════════════════════════════════════════════════════════════════════════
# Auth — Register / Login
# ═══════════════════════════════════════════════════════════════════════════════


class RegisterRequest(BaseModel):
    username: Optional[str] = None
    password: str


class LoginRequest(BaseModel):
    username: Optional[str] = None
    password: Optional[str] = None


class TokenResponse(BaseModel):
    token: str


# ═══════════════════════════════════════════════════════════════════════════════
# Users
# ═══════════════════════════════════════════════════════════════════════════════


class UserOut(BaseModel):
    """Public view of a user record; the password hash is never included."""

    id: int
    username: Optional[str] = None


class UpdateUserRequest(BaseModel):
    name: Optional[str] = None
