"""
Create a user (e.g. the first super-admin). Run from project root:
  python -m sensorhub.scripts.create_user USERNAME PASSWORD [role]
Example:
  python -m sensorhub.scripts.create_user operator your-secure-password super-admin
"""
import argparse
import sys

from sensorhub.core.database import SessionLocal
from sensorhub.core.errors import DuplicateUsername, ValidationError
from sensorhub.core.roles import Role
from sensorhub.services.audit import AuditRecorder
from sensorhub.services.authenticator import Authenticator
from sensorhub.services.credential_store import CredentialStore


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Create a SensorHub user.")
    parser.add_argument("username", help="Username (1-255 chars)")
    parser.add_argument("password", help="Password")
    parser.add_argument(
        "role",
        nargs="?",
        default=Role.SUPER_ADMIN.value,
        choices=[r.value for r in Role],
    )
    args = parser.parse_args(argv)

    db = SessionLocal()
    try:
        store = CredentialStore(db)
        authenticator = Authenticator(store, AuditRecorder(store))
        try:
            user = authenticator.register(args.username, args.password, args.role)
        except (ValidationError, DuplicateUsername) as e:
            print(e.message, file=sys.stderr)
            return 1
        print(f"Created user '{user.username}' with role '{user.role}'.")
        return 0
    finally:
        db.close()


if __name__ == "__main__":
    sys.exit(main())
