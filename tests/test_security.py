"""Unit tests for app.core.security: bcrypt hashing and JWT issuing/decoding."""

import unittest
from datetime import UTC, datetime, timedelta

import jwt

from app.core.config import settings
from app.core.security import (
    create_access_token,
    decode_access_token,
    hash_password,
    verify_password,
)


class TestPasswordHashing(unittest.TestCase):
    """Passwords are stored as salted one-way hashes."""

    def test_hash_is_not_plaintext_and_verifies(self) -> None:
        hashed = hash_password("pw1")
        self.assertNotEqual(hashed, "pw1")
        self.assertTrue(verify_password("pw1", hashed))
        self.assertFalse(verify_password("wrong", hashed))

    def test_same_password_gets_different_salts(self) -> None:
        self.assertNotEqual(hash_password("pw1"), hash_password("pw1"))

    def test_malformed_stored_hash_does_not_verify(self) -> None:
        self.assertFalse(verify_password("pw1", "not-a-bcrypt-hash"))


class TestAccessToken(unittest.TestCase):
    """create_access_token embeds the identity and a 24h lifetime by default."""

    def test_claims_round_trip(self) -> None:
        token = create_access_token(7, "alice", 1)
        payload = decode_access_token(token)
        self.assertEqual(payload["sub"], "7")
        self.assertEqual(payload["username"], "alice")
        self.assertEqual(payload["role"], 1)

    def test_expiry_is_issued_at_plus_configured_lifetime(self) -> None:
        payload = decode_access_token(create_access_token(1, "alice", 0))
        self.assertEqual(payload["exp"] - payload["iat"], settings.JWT_EXPIRE_MINUTES * 60)

    def test_tampered_token_raises(self) -> None:
        token = create_access_token(1, "alice", 0)
        head, body, sig = token.split(".")
        tampered = ".".join([head, body, sig[:-2] + ("AA" if sig[-2:] != "AA" else "BB")])
        with self.assertRaises(jwt.PyJWTError):
            decode_access_token(tampered)

    def test_expired_token_raises(self) -> None:
        past = datetime.now(UTC) - timedelta(days=2)
        token = jwt.encode(
            {"sub": "1", "username": "alice", "role": 0, "iat": past, "exp": past + timedelta(hours=24)},
            settings.JWT_SECRET.get_secret_value(),
            algorithm=settings.JWT_ALGORITHM,
        )
        with self.assertRaises(jwt.ExpiredSignatureError):
            decode_access_token(token)


if __name__ == "__main__":
    unittest.main()
