"""Tests for Authenticator: registration, login round-trip and failure semantics."""

import unittest
from unittest.mock import patch

from sqlalchemy.exc import OperationalError

from tests.support import make_session_factory
from sensorhub.core.errors import DuplicateUsername, InvalidCredentials, ValidationError
from sensorhub.core.security import decode_access_token, verify_password
from sensorhub.models import User
from sensorhub.services.audit import AuditRecorder
from sensorhub.services.authenticator import Authenticator
from sensorhub.services.credential_store import CredentialStore


class AuthenticatorTestCase(unittest.TestCase):
    def setUp(self) -> None:
        self.db = make_session_factory()()
        self.store = CredentialStore(self.db)
        self.auth = Authenticator(self.store, AuditRecorder(self.store))

    def tearDown(self) -> None:
        self.db.close()


class TestRegister(AuthenticatorTestCase):
    def test_register_stores_hash_and_returns_view(self) -> None:
        view = self.auth.register("alice", "pw123", "admin-distance1")
        self.assertEqual(view.username, "alice")
        self.assertEqual(view.role, "admin-distance1")
        self.assertNotIn("password_hash", view.model_dump())
        user = self.store.get_by_id(view.id)
        self.assertNotEqual(user.password_hash, "pw123")
        self.assertTrue(verify_password("pw123", user.password_hash))

    def test_missing_fields(self) -> None:
        cases = [
            (None, "pw123", "super-admin"),
            ("alice", None, "super-admin"),
            ("alice", "pw123", None),
            ("   ", "pw123", "super-admin"),
            ("alice", "", "super-admin"),
        ]
        for args in cases:
            with self.subTest(args=args):
                with self.assertRaises(ValidationError):
                    self.auth.register(*args)
        self.assertEqual(self.db.query(User).count(), 0)

    def test_unknown_role_rejected_at_registration(self) -> None:
        with self.assertRaises(ValidationError):
            self.auth.register("alice", "pw123", "root")
        self.assertEqual(self.db.query(User).count(), 0)

    def test_duplicate_registration(self) -> None:
        self.auth.register("alice", "pw123", "admin-distance1")
        with self.assertRaises(DuplicateUsername):
            self.auth.register("alice", "other", "super-admin")
        self.assertEqual(self.db.query(User).count(), 1)

    def test_password_over_72_bytes_rejected(self) -> None:
        for password in ("x" * 73, "\u00e9" * 37):
            with self.subTest(length=len(password.encode("utf-8"))):
                with self.assertRaises(ValidationError):
                    self.auth.register("alice", password, "super-admin")
        self.assertEqual(self.db.query(User).count(), 0)

    def test_72_byte_password_accepted(self) -> None:
        view = self.auth.register("alice", "x" * 72, "super-admin")
        self.assertEqual(self.auth.login("alice", "x" * 72, "192.0.2.7").user.id, view.id)

    def test_padded_username_logs_in_with_or_without_padding(self) -> None:
        view = self.auth.register(" alice ", "pw123", "admin-distance1")
        self.assertEqual(view.username, "alice")
        for username in (" alice ", "alice", "alice\t"):
            with self.subTest(username=username):
                result = self.auth.login(username, "pw123", "192.0.2.7")
                self.assertEqual(result.user.id, view.id)


class TestLogin(AuthenticatorTestCase):
    def setUp(self) -> None:
        super().setUp()
        self.alice = self.auth.register("alice", "pw123", "admin-distance1")

    def test_round_trip(self) -> None:
        result = self.auth.login("alice", "pw123", "192.0.2.7")
        self.assertEqual(result.role, "admin-distance1")
        self.assertEqual(result.user.id, self.alice.id)
        payload = decode_access_token(result.token)
        self.assertEqual(payload["sub"], str(self.alice.id))
        self.assertEqual(payload["role"], "admin-distance1")

    def test_login_records_audit(self) -> None:
        self.auth.login("alice", "pw123", "192.0.2.7")
        self.db.expire_all()
        user = self.store.get_by_id(self.alice.id)
        self.assertEqual(user.last_ip, "192.0.2.7")
        self.assertIsNotNone(user.last_login)

    def test_wrong_password(self) -> None:
        for attempt in ("wrong", "pw1234", "PW123", ""):
            with self.subTest(password=attempt):
                with self.assertRaises((InvalidCredentials, ValidationError)):
                    self.auth.login("alice", attempt, "192.0.2.7")
        self.db.expire_all()
        self.assertIsNone(self.store.get_by_id(self.alice.id).last_login)

    def test_unknown_user_and_wrong_password_look_the_same(self) -> None:
        with self.assertRaises(InvalidCredentials) as unknown:
            self.auth.login("mallory", "pw123", "192.0.2.7")
        with self.assertRaises(InvalidCredentials) as wrong:
            self.auth.login("alice", "wrong", "192.0.2.7")
        self.assertEqual(unknown.exception.message, wrong.exception.message)

    def test_missing_credentials(self) -> None:
        with self.assertRaises(ValidationError):
            self.auth.login(None, "pw123", "192.0.2.7")

    def test_audit_failure_does_not_block_login(self) -> None:
        with patch.object(
            self.store,
            "record_login",
            side_effect=OperationalError("UPDATE users", {}, Exception("db down")),
        ):
            result = self.auth.login("alice", "pw123", "192.0.2.7")
        self.assertEqual(result.role, "admin-distance1")
        self.assertTrue(result.token)


if __name__ == "__main__":
    unittest.main()
