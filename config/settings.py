"""
Application settings loaded from environment variables.
"""

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # ── Security Secrets ──────────────────────────────────────────────────
    jwt_secret: str = "change-me-jwt-secret-key"       # HMAC secret for auth tokens
    jwt_expiry_seconds: int = 3600                      # 1 hour
    bcrypt_rounds: int = 10                             # bcrypt work factor

    # ── Access Rules ─────────────────────────────────────────────────────
    protect_user_routes: bool = False   # also require a token on /api/users/{id}
    unique_usernames: bool = False      # reject duplicate usernames with 409

    # ── Server ───────────────────────────────────────────────────────────
    port: int = 3000
    host: str = "0.0.0.0"
    debug: bool = False
    cors_origins: list = ["*"]
    public_url: str = "http://localhost:3000"   # advertised in the API document

    model_config = {
        "env_file": ".env",
        "case_sensitive": False,
    }


config = Settings()
