"""
User store lifecycle, bound to the FastAPI application.
"""

from __future__ import annotations

import logging

from fastapi import FastAPI, Request

from database.store import UserStore

logger = logging.getLogger(__name__)


def init_store(app: FastAPI) -> UserStore:
    """Attach a fresh, empty store to ``app.state``."""
    store = UserStore()
    app.state.user_store = store
    return store


def close_store(app: FastAPI) -> None:
    store = getattr(app.state, "user_store", None)
    if store is not None:
        logger.info("Discarding %d in-memory users", len(store))
        store.clear()


def get_user_store(request: Request) -> UserStore:
    """Dependency function — use in FastAPI `Depends(get_user_store)`."""
    return request.app.state.user_store
