"""
Application package initializer.

This package contains the entrypoint for the course and tour
registration API.  The code is split into ``core`` (configuration,
logging, CORS and the admin gate), ``schemas`` (pydantic payloads),
``services`` (the in‑memory storage repository and admin views) and
``api`` (FastAPI routers).
"""

from .main import app, create_app  # noqa: F401
