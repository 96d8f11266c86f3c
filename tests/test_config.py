"""Tests for Settings validation and defaults."""

import unittest

from pydantic import ValidationError

from tests import support  # noqa: F401  (applies test settings)
from sensorhub.core.config import Settings


class TestDefaults(unittest.TestCase):
    def test_security_defaults(self) -> None:
        fields = Settings.model_fields
        self.assertEqual(fields["JWT_EXPIRE_MINUTES"].default, 60)
        self.assertEqual(fields["BCRYPT_ROUNDS"].default, 10)
        self.assertEqual(fields["JWT_ALGORITHM"].default, "HS256")
        self.assertFalse(fields["DEBUG"].default)

    def test_api_prefix_normalized(self) -> None:
        self.assertEqual(Settings(API_PREFIX="/api/").API_PREFIX, "/api")

    def test_log_level_normalized(self) -> None:
        self.assertEqual(Settings(LOG_LEVEL="debug").LOG_LEVEL, "DEBUG")


class TestValidation(unittest.TestCase):
    def test_rejects_invalid_values(self) -> None:
        cases = [
            {"DATABASE_URL": "mysql://root@localhost/iot"},
            {"DATABASE_URL": "  "},
            {"JWT_SECRET": " "},
            {"JWT_EXPIRE_MINUTES": 0},
            {"BCRYPT_ROUNDS": 3},
            {"RETENTION_DAYS": 0},
            {"DISTANCE_MAX_LIMIT": 0},
            {"API_PREFIX": "api"},
            {"LOG_LEVEL": "LOUD"},
        ]
        for overrides in cases:
            with self.subTest(overrides=overrides):
                with self.assertRaises(ValidationError):
                    Settings(**overrides)


if __name__ == "__main__":
    unittest.main()
