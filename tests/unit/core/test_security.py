"""Tests for password hashing and access token issuing/verification."""

from datetime import timedelta

import jwt

from event_booking.core.config import settings
from event_booking.core.security import (
    create_access_token,
    decode_access_token,
    get_password_hash,
    verify_password,
)


class TestPasswordHashing:
    def test_hash_is_not_plaintext(self):
        hashed = get_password_hash("password123")
        assert hashed != "password123"
        assert hashed.startswith("$2")

    def test_hash_is_salted(self):
        assert get_password_hash("password123") != get_password_hash("password123")

    def test_verify_correct_password(self):
        hashed = get_password_hash("password123")
        assert verify_password("password123", hashed) is True

    def test_verify_wrong_password(self):
        hashed = get_password_hash("password123")
        assert verify_password("password124", hashed) is False

    def test_verify_malformed_hash_returns_false(self):
        assert verify_password("password123", "not-a-bcrypt-hash") is False


class TestAccessToken:
    def test_claims_round_trip(self):
        token = create_access_token("a@b.com", {"userId": 7, "email": "a@b.com"})
        claims = decode_access_token(token)

        assert claims is not None
        assert claims["sub"] == "a@b.com"
        assert claims["userId"] == 7
        assert claims["email"] == "a@b.com"
        assert claims["exp"] > claims["iat"]

    def test_default_lifetime_from_settings(self):
        token = create_access_token("a@b.com")
        claims = decode_access_token(token)
        assert claims["exp"] - claims["iat"] == settings.ACCESS_TOKEN_EXPIRE_MINUTES * 60

    def test_expired_token_rejected(self):
        token = create_access_token("a@b.com", expires_delta=timedelta(seconds=-10))
        assert decode_access_token(token) is None

    def test_tampered_token_rejected(self):
        token = create_access_token("a@b.com", {"userId": 1})
        header, payload, signature = token.split(".")
        forged = jwt.encode({"sub": "evil@b.com", "userId": 2, "exp": 9999999999}, "other-secret-key-of-enough-length",
                            algorithm="HS256")
        assert decode_access_token(f"{header}.{forged.split('.')[1]}.{signature}") is None

    def test_token_signed_with_other_key_rejected(self):
        token = jwt.encode({"sub": "a@b.com", "exp": 9999999999}, "other-secret-key-of-enough-length",
                           algorithm="HS256")
        assert decode_access_token(token) is None

    def test_garbage_rejected(self):
        assert decode_access_token("not.a.token") is None

    def test_token_without_subject_rejected(self):
        token = jwt.encode({"exp": 9999999999}, settings.SECRET_KEY, algorithm=settings.ALGORITHM)
        assert decode_access_token(token) is None
