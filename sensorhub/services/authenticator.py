"""Authenticator: registration and login over the credential store, hasher and token issuer."""

import logging
from dataclasses import dataclass

from sensorhub.core.errors import InvalidCredentials, ValidationError
from sensorhub.core.roles import ROLE_VALUES, Role
from sensorhub.core.security import (
    MAX_PASSWORD_BYTES,
    create_access_token,
    hash_password,
    password_too_long,
    verify_password,
)
from sensorhub.schemas.auth import UserView
from sensorhub.services.audit import AuditRecorder
from sensorhub.services.credential_store import CredentialStore

logger = logging.getLogger(__name__)

# Same text for unknown user and wrong password so clients cannot enumerate usernames.
INVALID_CREDENTIALS_MESSAGE = "Invalid username or password."


def normalize_username(username: str | None) -> str:
    """Usernames are compared without surrounding whitespace on both register and login."""
    return (username or "").strip()


@dataclass(frozen=True)
class LoginResult:
    token: str
    role: str
    user: UserView


class Authenticator:
    """
    Orchestrates lookup -> verify -> audit -> issue for login, and
    validate -> hash -> insert for registration.

    Hashing and verification are deliberately slow (bcrypt); call from a worker
    thread, never from the event loop.
    """

    def __init__(self, store: CredentialStore, audit: AuditRecorder) -> None:
        self.store = store
        self.audit = audit

    def register(
        self, username: str | None, password: str | None, role: str | None
    ) -> UserView:
        """Create a user. Raises ValidationError or DuplicateUsername. Issues no token."""
        username = normalize_username(username)
        role = (role or "").strip()
        if not username or not password or not role:
            raise ValidationError("Missing required fields: username, password, role")
        if password_too_long(password):
            raise ValidationError(
                f"Password must be at most {MAX_PASSWORD_BYTES} bytes when UTF-8 encoded"
            )
        if Role.parse(role) is None:
            raise ValidationError(
                f"Unknown role {role!r}; must be one of {sorted(ROLE_VALUES)}"
            )
        user = self.store.create_user(username, hash_password(password), role)
        logger.info("Registered user: id=%s username=%s role=%s", user.id, user.username, user.role)
        return UserView.model_validate(user)

    def login(
        self, username: str | None, password: str | None, ip_address: str
    ) -> LoginResult:
        """Authenticate and issue a 1-hour token. Raises InvalidCredentials on any mismatch."""
        username = normalize_username(username)
        if not username or not password:
            raise ValidationError("Missing required fields: username, password")

        user = self.store.find_by_username(username)
        if user is None:
            logger.info("Login failed: unknown username=%s ip=%s", username, ip_address)
            raise InvalidCredentials(INVALID_CREDENTIALS_MESSAGE)
        if not verify_password(password, user.password_hash):
            logger.info("Login failed: wrong password user_id=%s ip=%s", user.id, ip_address)
            raise InvalidCredentials(INVALID_CREDENTIALS_MESSAGE)

        self.audit.record_login(user.id, ip_address)
        token = create_access_token(user.id, user.role)
        logger.info("Login succeeded: user_id=%s role=%s ip=%s", user.id, user.role, ip_address)
        return LoginResult(
            token=token,
            role=user.role,
            user=UserView(id=user.id, username=user.username, role=user.role),
        )
