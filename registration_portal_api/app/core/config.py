"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables.  Defaults are provided for all fields so the
service starts with no configuration at all; in a deployment you
should at least override ``SECRET_KEY`` and ``ADMIN_PASSWORD``.
"""

import os
from dataclasses import dataclass, field
from typing import List


def _env_bool(name: str, default: str) -> bool:
    return os.getenv(name, default).lower() in {"1", "true", "yes"}


def _env_list(name: str, default: str) -> List[str]:
    return [item.strip() for item in os.getenv(name, default).split(",") if item.strip()]


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "Registration Portal API")
    api_version: str = os.getenv("API_VERSION", "1.0.0")
    debug: bool = _env_bool("DEBUG", "false")
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    log_file: str = os.getenv("LOG_FILE", "")

    host: str = os.getenv("HOST", "0.0.0.0")
    port: int = int(os.getenv("PORT", "5000"))

    # Secret used to sign admin session tokens.
    secret_key: str = os.getenv("SECRET_KEY", "change_me")
    access_token_expire_minutes: int = int(os.getenv("ACCESS_TOKEN_EXPIRE_MINUTES", str(60 * 8)))

    # Shared administrator secret exchanged for a session token at
    # ``POST /api/admin/login``.  The gate is only enforced on admin
    # routes when ``ADMIN_AUTH_REQUIRED`` is set; otherwise the REST
    # surface is open and the login endpoint merely issues tokens for
    # the panel's own bookkeeping.
    admin_password: str = os.getenv("ADMIN_PASSWORD", "admin2025")
    admin_auth_required: bool = _env_bool("ADMIN_AUTH_REQUIRED", "false")

    # Production frontend origin, added to the CORS allow‑list when set.
    frontend_url: str = os.getenv("FRONTEND_URL", "")
    cors_origins: List[str] = field(
        default_factory=lambda: _env_list("CORS_ORIGINS", "http://localhost:5173,http://localhost:3000")
    )

    # Populate the catalogue with the default courses and tours at startup.
    seed_default_data: bool = _env_bool("SEED_DEFAULT_DATA", "true")


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.  Environment variables
# should be set before importing this module.
settings = Settings()
