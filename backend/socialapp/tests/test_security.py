"""
Tests for tokens, password hashing and the bearer guard.
"""
from datetime import timedelta
import pytest
from socialapp.core.config import settings
from socialapp.core.exceptions import AuthError
from socialapp.core.security import (
    create_access_token, decode_access_token, get_password_hash, verify_password
)
from socialapp.services.auth_service import authenticate


def test_password_hash_is_salted():
    first = get_password_hash("secret1")
    second = get_password_hash("secret1")
    assert first != second
    assert verify_password("secret1", first)
    assert verify_password("secret1", second)
    assert not verify_password("secret2", first)


def test_token_has_no_expiry_by_default():
    token = create_access_token({"user_id": 1, "email": "a@x.com"})
    payload = decode_access_token(token)
    assert payload["user_id"] == 1
    assert "exp" not in payload


def test_token_expiry_when_configured(monkeypatch):
    monkeypatch.setattr(settings, "ACCESS_TOKEN_EXPIRE_DAYS", 7)
    payload = decode_access_token(create_access_token({"user_id": 1}))
    assert "exp" in payload


def test_expired_token_is_rejected():
    token = create_access_token({"user_id": 1}, expires_delta=timedelta(seconds=-10))
    assert decode_access_token(token) is None


def test_authenticate_valid_token():
    token = create_access_token({"user_id": 42, "email": "a@x.com"})
    assert authenticate(token) == 42


def test_authenticate_missing_token():
    with pytest.raises(AuthError) as exc_info:
        authenticate(None)
    assert exc_info.value.status_code == 401


@pytest.mark.parametrize("token", [
    "garbage",
    create_access_token({"email": "a@x.com"}),
    create_access_token({"user_id": "1"}),
])
def test_authenticate_invalid_token(token):
    with pytest.raises(AuthError) as exc_info:
        authenticate(token)
    assert exc_info.value.status_code == 403


def test_authenticate_rejects_foreign_signature(monkeypatch):
    token = create_access_token({"user_id": 1})
    monkeypatch.setattr(settings, "SECRET_KEY", "another-secret")
    with pytest.raises(AuthError):
        authenticate(token)
