"""
Auth API routes — register, login.

Route prefix: /api
"""

from __future__ import annotations

import asyncio
import logging
from typing import Any, Dict

from fastapi import APIRouter, Depends, HTTPException, status

from auth.dependencies import user_store
from auth.jwt import create_token
from auth.password import hash_password, verify_password
from config.settings import config
from database.store import DuplicateUsernameError, UserStore
from utils.schemas import LoginRequest, RegisterRequest, TokenResponse, UserOut

logger = logging.getLogger(__name__)

router = APIRouter(tags=["auth"])


# ── Endpoints ──────────────────────────────────────────────────────────


@router.post(
    "/register",
    response_model=UserOut,
    status_code=status.HTTP_201_CREATED,
    summary="Register a new user",
    description=(
        "Register a new user by providing a username and password. The password "
        "will be securely hashed before storing it in the database."
    ),
)
async def register(
    req: RegisterRequest,
    store: UserStore = Depends(user_store),
) -> Dict[str, Any]:
    password_hash = await asyncio.to_thread(hash_password, req.password)
    try:
        user = store.append(req.username, password_hash, unique=config.unique_usernames)
    except DuplicateUsernameError:
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail="Username already taken",
        )

    logger.info("Registered user %s (%d)", user.username, user.id)
    return {"id": user.id, "username": user.username}


@router.post(
    "/login",
    response_model=TokenResponse,
    summary="Log in a user and generate an auth token",
    description=(
        "Log in by providing a username and password. If the credentials are "
        "correct, an authentication token will be returned, which can be used "
        "to access protected routes."
    ),
    responses={401: {"description": "Invalid credentials"}},
)
async def login(
    req: LoginRequest,
    store: UserStore = Depends(user_store),
) -> Dict[str, Any]:
    user = store.find_by_username(req.username)

    valid = False
    if user is not None and req.password is not None:
        valid = await asyncio.to_thread(verify_password, req.password, user.password_hash)
    if not valid:
        logger.warning("Failed login for %s", req.username)
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid credentials",
        )

    token = create_token({"username": user.username})
    logger.info("Login: %s (%d)", user.username, user.id)
    return {"token": token}
