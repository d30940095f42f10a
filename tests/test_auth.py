from datetime import timedelta

import jwt
import pytest

from auth import create_access_token, decode_access_token, hash_password, verify_password

SECRET = "unit-test-secret-long-enough-for-hs256"


# ================================================================
# Passwords
# ================================================================

def test_hash_and_verify_password():
    h = hash_password("hunter2")
    assert h != "hunter2"
    assert verify_password("hunter2", h)
    assert not verify_password("hunter3", h)


def test_verify_password_handles_blank_and_garbage():
    assert not verify_password("", hash_password("x"))
    assert not verify_password("x", None)
    assert not verify_password("x", "not-a-real-hash")


def test_hash_password_rejects_blank():
    with pytest.raises(ValueError):
        hash_password("")


# ================================================================
# Tokens
# ================================================================

def test_token_roundtrip_carries_subject():
    token = create_access_token(secret=SECRET, user_id="abc123", expires_in=timedelta(days=7))
    payload = decode_access_token(token=token, secret=SECRET)
    assert payload["sub"] == "abc123"
    assert payload["exp"] - payload["iat"] == 7 * 24 * 3600


def test_expired_token_rejected():
    token = create_access_token(secret=SECRET, user_id="abc123", expires_in=timedelta(seconds=-30))
    with pytest.raises(jwt.ExpiredSignatureError):
        decode_access_token(token=token, secret=SECRET)


def test_wrong_secret_rejected():
    token = create_access_token(secret=SECRET, user_id="abc123", expires_in=timedelta(hours=1))
    with pytest.raises(jwt.InvalidSignatureError):
        decode_access_token(token=token, secret="a-completely-different-secret-value")


def test_token_without_subject_rejected():
    token = jwt.encode({"exp": 4102444800}, SECRET, algorithm="HS256")
    with pytest.raises(jwt.InvalidTokenError):
        decode_access_token(token=token, secret=SECRET)


def test_blank_token_rejected():
    with pytest.raises(jwt.InvalidTokenError):
        decode_access_token(token="", secret=SECRET)
