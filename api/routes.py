"""
REST API routes — user CRUD.

``GET /users`` always requires a bearer token. The per-id routes are open
unless ``PROTECT_USER_ROUTES`` is set, in which case ``main.create_app``
mounts this router behind the same gate.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional

from fastapi import APIRouter, Depends, HTTPException, Path, status
from fastapi.responses import PlainTextResponse

from auth.dependencies import get_current_user, user_store
from config.settings import config
from database.store import DuplicateUsernameError, UserStore
from utils.schemas import UpdateUserRequest, UserOut

logger = logging.getLogger(__name__)

router = APIRouter(tags=["users"])

_NOT_FOUND = {404: {"description": "User not found"}}


def _not_found() -> HTTPException:
    return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="User not found")


def _conflict() -> HTTPException:
    return HTTPException(status_code=status.HTTP_409_CONFLICT, detail="Username already taken")


@router.get(
    "/users",
    response_model=List[UserOut],
    summary="Returns a list of users",
    description=(
        "Retrieve a list of registered users. This endpoint requires a valid "
        "authentication token to access: send `Authorization: Bearer <your_token>`."
    ),
    responses={401: {"description": "Unauthorized"}, 403: {"description": "Forbidden"}},
)
async def list_users(
    store: UserStore = Depends(user_store),
    claims: Dict[str, Any] = Depends(get_current_user),
) -> List[Dict[str, Any]]:
    return [{"id": u.id, "username": u.username} for u in store.list_all()]


@router.get(
    "/users/{user_id}",
    response_model=UserOut,
    summary="Get a user by ID",
    description="Retrieve a specific user by their unique ID.",
    responses=_NOT_FOUND,
)
async def get_user(
    user_id: int = Path(..., description="The user ID"),
    store: UserStore = Depends(user_store),
) -> Dict[str, Any]:
    user = store.find_by_id(user_id)
    if user is None:
        raise _not_found()
    return {"id": user.id, "username": user.username}


@router.put(
    "/users/{user_id}",
    response_class=PlainTextResponse,
    summary="Update a user by ID",
    description="Update the details of an existing user by providing their ID.",
    responses=_NOT_FOUND,
)
async def update_user(
    req: Optional[UpdateUserRequest] = None,
    user_id: int = Path(..., description="The user ID"),
    store: UserStore = Depends(user_store),
) -> str:
    name = req.name if req is not None else None
    try:
        user = store.update_username(user_id, name, unique=config.unique_usernames)
    except DuplicateUsernameError:
        raise _conflict()
    if user is None:
        raise _not_found()

    logger.info("Updated user %d", user_id)
    return f"User {user_id} updated to {name}"


@router.patch(
    "/users/{user_id}",
    response_class=PlainTextResponse,
    summary="Partially update a user by ID",
    description=(
        "Partially update the details of an existing user by providing their ID. "
        "Only the fields specified in the request body will be updated."
    ),
    responses=_NOT_FOUND,
)
async def patch_user(
    req: Optional[UpdateUserRequest] = None,
    user_id: int = Path(..., description="The user ID"),
    store: UserStore = Depends(user_store),
) -> str:
    name = req.name if req is not None else None
    if name:
        try:
            user = store.update_username(user_id, name, unique=config.unique_usernames)
        except DuplicateUsernameError:
            raise _conflict()
    else:
        user = store.find_by_id(user_id)
    if user is None:
        raise _not_found()

    logger.info("Partially updated user %d", user_id)
    return f"User {user_id} partially updated to {name}"


@router.delete(
    "/users/{user_id}",
    response_class=PlainTextResponse,
    summary="Delete a user by ID",
    description="Delete a user from the database by providing their unique ID.",
    responses=_NOT_FOUND,
)
async def delete_user(
    user_id: int = Path(..., description="The user ID"),
    store: UserStore = Depends(user_store),
) -> str:
    if not store.remove(user_id):
        raise _not_found()

    logger.info("Deleted user %d", user_id)
    return f"User {user_id} deleted successfully"
