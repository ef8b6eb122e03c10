"""
QA Learning API — application entry point.
"""

from __future__ import annotations

import logging
import sys
from contextlib import asynccontextmanager

import uvicorn
from fastapi import Depends, FastAPI
from fastapi.middleware.cors import CORSMiddleware

from api.middleware import register_exception_handlers, register_middleware
from api.routes import router as users_router
from auth.dependencies import get_current_user
from auth.routes import router as auth_router
from config.settings import config
from database.session import close_store, init_store

logging.basicConfig(
    level=logging.DEBUG if config.debug else logging.INFO,
    format="%(asctime)s  %(levelname)-8s  %(name)s — %(message)s",
    stream=sys.stdout,
)
logger = logging.getLogger(__name__)

DOCS_PATH = "/api-docs"

DESCRIPTION = (
    "The QA Learning API is designed to provide a hands-on learning experience "
    "for quality assurance practices. It features user management operations, "
    "including user registration, login with token-based authentication, and the "
    "ability to retrieve, update, and delete users. The API helps new QA engineers "
    "understand the fundamentals of working with RESTful APIs, security practices "
    "such as authentication, and essential CRUD operations."
)


@asynccontextmanager
async def lifespan(app: FastAPI):
    if config.protect_user_routes:
        logger.info("All /api/users routes require a bearer token")
    if config.jwt_secret == "change-me-jwt-secret-key":
        logger.warning("JWT_SECRET is not set; using the built-in development secret")
    logger.info("Server is running at %s", config.public_url)
    logger.info("Swagger docs available at %s%s", config.public_url, DOCS_PATH)
    yield
    close_store(app)


def create_app() -> FastAPI:
    app = FastAPI(
        title="QA Learning API",
        version="1.0.0",
        description=DESCRIPTION,
        servers=[{"url": config.public_url}],
        docs_url=DOCS_PATH,
        redoc_url=None,
        lifespan=lifespan,
    )

    # CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_middleware(app)
    register_exception_handlers(app)

    init_store(app)

    # Routes
    user_route_deps = [Depends(get_current_user)] if config.protect_user_routes else None
    app.include_router(auth_router, prefix="/api")
    app.include_router(users_router, prefix="/api", dependencies=user_route_deps)

    return app


app = create_app()

if __name__ == "__main__":
    uvicorn.run(
        "main:app",
        host=config.host,
        port=config.port,
        reload=config.debug,
        log_level="debug" if config.debug else "info",
    )
