"""
CORS configuration for the browser frontend.

The panel is served from a different origin than the API: the Vite
dev server locally and Netlify in production.  ``setup_cors`` installs
Starlette's ``CORSMiddleware`` with the configured origins, the
optional ``FRONTEND_URL`` and any Netlify subdomain.
"""

from typing import List

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .config import Settings


NETLIFY_ORIGIN_REGEX = r"https://.*\.netlify\.(app|com)"
ALLOWED_METHODS = ["GET", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"]
ALLOWED_HEADERS = ["Content-Type", "Authorization"]


def allowed_origins(config: Settings) -> List[str]:
    """Explicit origins accepted by the API, without duplicates."""
    origins = list(config.cors_origins)
    if config.frontend_url and config.frontend_url not in origins:
        origins.append(config.frontend_url)
    return origins


def setup_cors(app: FastAPI, config: Settings) -> None:
    app.add_middleware(
        CORSMiddleware,
        allow_origins=allowed_origins(config),
        allow_origin_regex=NETLIFY_ORIGIN_REGEX,
        allow_credentials=True,
        allow_methods=ALLOWED_METHODS,
        allow_headers=ALLOWED_HEADERS,
    )
