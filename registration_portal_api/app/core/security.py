"""
Admin gate: shared‑secret login and signed session tokens.

The administrative panel is protected by a single shared password.
Exchanging that password at ``POST /api/admin/login`` yields an admin
session token: a JSON claim set (``sub``, ``role``, ``iat``, ``exp``)
signed with HMAC‑SHA256 and laid out as ``header.claims.signature``
with base64url segments.  Clients send it back as
``Authorization: Bearer <token>``.

This is a convenience gate, not an authorization system: there are no
user accounts behind it and anyone holding the shared secret is an
administrator.  Every check reads the ``Settings`` the application was
built with (``app.state.settings``), so the gate, the password and the
signing key follow whatever configuration ``create_app`` received.
``require_admin`` only rejects requests when that configuration has
``admin_auth_required`` set.  Nothing in this module touches the
storage repository.
"""

import base64
import hashlib
import hmac
import json
import logging
import time
from typing import Any, Dict, Optional

from fastapi import Depends, HTTPException, Request, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from .config import Settings


logger = logging.getLogger(__name__)

ADMIN_SUBJECT = "admin"
ADMIN_ROLE = "admin"
_TOKEN_HEADER = {"alg": "HS256", "typ": "JWT"}


def _encode_segment(claims: Dict[str, Any]) -> str:
    raw = json.dumps(claims, separators=(",", ":"), sort_keys=True).encode("utf-8")
    return base64.urlsafe_b64encode(raw).rstrip(b"=").decode("ascii")


def _decode_segment(segment: str) -> bytes:
    return base64.urlsafe_b64decode(segment + "=" * (-len(segment) % 4))


def _signature(signing_input: str, secret_key: str) -> bytes:
    return hmac.new(secret_key.encode("utf-8"), signing_input.encode("ascii"), hashlib.sha256).digest()


def encode_token(claims: Dict[str, Any], secret_key: str, expires_in: int) -> str:
    """Sign ``claims`` into a token valid for ``expires_in`` seconds.

    ``iat`` and ``exp`` are stamped from the current time and override
    any values already present in ``claims``.
    """
    issued_at = int(time.time())
    body = {**claims, "iat": issued_at, "exp": issued_at + expires_in}
    signing_input = f"{_encode_segment(_TOKEN_HEADER)}.{_encode_segment(body)}"
    signature = base64.urlsafe_b64encode(_signature(signing_input, secret_key)).rstrip(b"=").decode("ascii")
    return f"{signing_input}.{signature}"


def decode_token(token: str, secret_key: str) -> Optional[Dict[str, Any]]:
    """Return the claims of a token signed with ``secret_key``.

    Malformed, tampered and expired tokens yield ``None``.
    """
    parts = token.split(".")
    if len(parts) != 3:
        return None
    header_b64, claims_b64, signature_b64 = parts
    try:
        expected = _signature(f"{header_b64}.{claims_b64}", secret_key)
        if not hmac.compare_digest(expected, _decode_segment(signature_b64)):
            return None
        claims = json.loads(_decode_segment(claims_b64).decode("utf-8"))
    except (ValueError, UnicodeError):
        return None
    if not isinstance(claims, dict) or not isinstance(claims.get("exp"), int):
        return None
    if claims["exp"] < int(time.time()):
        return None
    return claims


def create_admin_token(config: Settings, expires_in: Optional[int] = None) -> str:
    """Issue an admin session token signed with ``config.secret_key``.

    The lifetime defaults to ``config.access_token_expire_minutes``.
    """
    lifetime = expires_in or config.access_token_expire_minutes * 60
    return encode_token({"sub": ADMIN_SUBJECT, "role": ADMIN_ROLE}, config.secret_key, lifetime)


def read_admin_token(token: str, config: Settings) -> Optional[Dict[str, Any]]:
    """Return the claims of a valid admin session token, else ``None``.

    Besides signature and expiry, the token must carry the admin
    subject and role; other signed tokens are not sessions.
    """
    claims = decode_token(token, config.secret_key)
    if claims is None:
        return None
    if claims.get("sub") != ADMIN_SUBJECT or claims.get("role") != ADMIN_ROLE:
        return None
    return claims


def verify_admin_password(password: str, config: Settings) -> bool:
    """Compare a submitted password with the shared admin secret."""
    return hmac.compare_digest(password.encode("utf-8"), config.admin_password.encode("utf-8"))


def login_admin(password: str, config: Settings) -> Optional[str]:
    """Exchange the admin password for a session token.

    Returns ``None`` when the password does not match.
    """
    if not verify_admin_password(password, config):
        logger.warning("Rejected admin login attempt")
        return None
    logger.info("Admin session issued")
    return create_admin_token(config)


def get_app_settings(request: Request) -> Settings:
    """Dependency returning the settings the running application was built with."""
    return request.app.state.settings


security = HTTPBearer(auto_error=False)


def _session_or_401(credentials: Optional[HTTPAuthorizationCredentials], config: Settings) -> Dict[str, Any]:
    if credentials is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Not authenticated",
            headers={"WWW-Authenticate": "Bearer"},
        )
    claims = read_admin_token(credentials.credentials, config)
    if claims is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid or expired token",
            headers={"WWW-Authenticate": "Bearer"},
        )
    return claims


def get_admin_session(
    credentials: HTTPAuthorizationCredentials = Depends(security),
    config: Settings = Depends(get_app_settings),
) -> Dict[str, Any]:
    """Dependency returning the admin session claims.

    Always requires a valid token, whether or not the gate is enforced.
    """
    return _session_or_401(credentials, config)


def require_admin(
    credentials: HTTPAuthorizationCredentials = Depends(security),
    config: Settings = Depends(get_app_settings),
) -> Optional[Dict[str, Any]]:
    """Dependency guarding administrative routes.

    Passes every request through (returning ``None``) unless the
    application's settings enable ``admin_auth_required``.
    """
    if not config.admin_auth_required:
        return None
    return _session_or_401(credentials, config)
