"""
Admin session tokens and the shared password.
"""

import time
from dataclasses import replace

import pytest

from registration_portal_api.app.core import security
from registration_portal_api.app.core.config import settings


@pytest.fixture
def config():
    return replace(settings, secret_key="k1", admin_password="clave", access_token_expire_minutes=5)


def test_token_roundtrip():
    token = security.encode_token({"sub": "admin"}, "k1", 60)
    claims = security.decode_token(token, "k1")
    assert claims["sub"] == "admin"
    assert claims["exp"] == claims["iat"] + 60
    assert claims["exp"] > time.time()


def test_token_signed_with_other_key_is_rejected():
    token = security.encode_token({"sub": "admin"}, "k1", 60)
    assert security.decode_token(token, "k2") is None


def test_expired_token_is_rejected(monkeypatch):
    token = security.encode_token({"sub": "admin"}, "k1", 60)
    later = time.time() + 3600
    monkeypatch.setattr(security.time, "time", lambda: later)
    assert security.decode_token(token, "k1") is None


def test_malformed_tokens_are_rejected():
    assert security.decode_token("not-a-token", "k1") is None
    assert security.decode_token("a.b.c", "k1") is None
    assert security.decode_token("", "k1") is None


def test_admin_token_carries_role_and_lifetime(config):
    claims = security.read_admin_token(security.create_admin_token(config), config)
    assert claims["sub"] == security.ADMIN_SUBJECT
    assert claims["role"] == security.ADMIN_ROLE
    assert claims["exp"] - claims["iat"] == 5 * 60


def test_admin_token_requires_admin_role(config):
    token = security.encode_token({"sub": security.ADMIN_SUBJECT}, config.secret_key, 60)
    assert security.decode_token(token, config.secret_key) is not None
    assert security.read_admin_token(token, config) is None


def test_verify_admin_password(config):
    assert security.verify_admin_password("clave", config)
    assert not security.verify_admin_password("Clave", config)
    assert security.login_admin("otra", config) is None
    assert security.read_admin_token(security.login_admin("clave", config), config) is not None
