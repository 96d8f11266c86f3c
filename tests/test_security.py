"""Unit tests for sensorhub.core.security: bcrypt hashing and JWT issue/decode."""

import unittest
from datetime import UTC, datetime, timedelta

import jwt

from tests import support  # noqa: F401  (applies test settings)
from sensorhub.core.config import settings
from sensorhub.core.security import (
    MAX_PASSWORD_BYTES,
    create_access_token,
    decode_access_token,
    hash_password,
    verify_password,
)


class TestPasswordHashing(unittest.TestCase):
    """hash_password produces a salted bcrypt digest; verify_password never raises on mismatch."""

    def test_hash_is_not_plaintext_and_verifies(self) -> None:
        digest = hash_password("pw123")
        self.assertNotEqual(digest, "pw123")
        self.assertTrue(digest.startswith("$2"))
        self.assertTrue(verify_password("pw123", digest))

    def test_wrong_password_is_false(self) -> None:
        digest = hash_password("pw123")
        self.assertFalse(verify_password("pw1234", digest))
        self.assertFalse(verify_password("", digest))

    def test_same_password_hashes_differently(self) -> None:
        self.assertNotEqual(hash_password("pw123"), hash_password("pw123"))

    def test_malformed_digest_is_false(self) -> None:
        self.assertFalse(verify_password("pw123", "not-a-bcrypt-hash"))

    def test_password_over_72_bytes_refused(self) -> None:
        with self.assertRaises(ValueError):
            hash_password("x" * 73)
        with self.assertRaises(ValueError):
            hash_password("\u00e9" * 37)

    def test_72_byte_password_does_not_match_longer_input(self) -> None:
        exact = "x" * MAX_PASSWORD_BYTES
        digest = hash_password(exact)
        self.assertTrue(verify_password(exact, digest))
        self.assertFalse(verify_password(exact + "x", digest))


class TestAccessToken(unittest.TestCase):
    """create_access_token embeds sub/role/iat/exp; decode enforces signature and expiry."""

    def test_claims(self) -> None:
        payload = decode_access_token(create_access_token(7, "super-admin"))
        self.assertEqual(payload["sub"], "7")
        self.assertEqual(payload["role"], "super-admin")
        self.assertEqual(payload["exp"] - payload["iat"], settings.JWT_EXPIRE_MINUTES * 60)

    def test_default_lifetime_is_one_hour(self) -> None:
        self.assertEqual(settings.JWT_EXPIRE_MINUTES, 60)

    def test_issued_59_minutes_ago_is_valid(self) -> None:
        issued = datetime.now(UTC) - timedelta(minutes=59)
        payload = decode_access_token(create_access_token(1, "admin-distance1", issued_at=issued))
        self.assertEqual(payload["role"], "admin-distance1")

    def test_issued_61_minutes_ago_is_expired(self) -> None:
        issued = datetime.now(UTC) - timedelta(minutes=61)
        token = create_access_token(1, "admin-distance1", issued_at=issued)
        with self.assertRaises(jwt.ExpiredSignatureError):
            decode_access_token(token)

    def test_other_key_rejected(self) -> None:
        now = datetime.now(UTC)
        token = jwt.encode(
            {"sub": "1", "role": "super-admin", "iat": now, "exp": now + timedelta(hours=1)},
            "some-other-secret",
            algorithm="HS256",
        )
        with self.assertRaises(jwt.InvalidSignatureError):
            decode_access_token(token)

    def test_missing_role_claim_rejected(self) -> None:
        now = datetime.now(UTC)
        token = jwt.encode(
            {"sub": "1", "iat": now, "exp": now + timedelta(hours=1)},
            settings.JWT_SECRET.get_secret_value(),
            algorithm=settings.JWT_ALGORITHM,
        )
        with self.assertRaises(jwt.MissingRequiredClaimError):
            decode_access_token(token)


if __name__ == "__main__":
    unittest.main()
