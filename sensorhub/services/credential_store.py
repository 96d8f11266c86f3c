"""Credential store: persistence of user records and their login audit fields."""

import logging
from datetime import UTC, datetime

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from sensorhub.core.errors import DuplicateUsername, ValidationError
from sensorhub.models import User
from sensorhub.schemas.auth import AuditLogEntry

logger = logging.getLogger(__name__)


class CredentialStore:
    """User table access over an injected session. Commits its own writes."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def find_by_username(self, username: str) -> User | None:
        return self.session.query(User).filter(User.username == username).first()

    def get_by_id(self, user_id: int) -> User | None:
        return self.session.query(User).filter(User.id == user_id).first()

    def create_user(self, username: str, password_hash: str, role: str) -> User:
        """
        Insert a new user.

        Raises ValidationError if any field is empty and DuplicateUsername if the
        username is taken; in both cases nothing is written.
        """
        if not username or not password_hash or not role:
            raise ValidationError("Missing required fields: username, password, role")
        user = User(username=username, password_hash=password_hash, role=role)
        self.session.add(user)
        try:
            self.session.commit()
        except IntegrityError as e:
            self.session.rollback()
            logger.info("Registration rejected: duplicate username=%s", username)
            raise DuplicateUsername(f"Username '{username}' is already taken.", cause=e) from e
        self.session.refresh(user)
        return user

    def record_login(self, user_id: int, ip_address: str) -> None:
        """Set last_login to now and last_ip to ip_address for user_id."""
        self.session.query(User).filter(User.id == user_id).update(
            {User.last_login: datetime.now(UTC), User.last_ip: ip_address},
            synchronize_session=False,
        )
        self.session.commit()

    def list_audit_log(self) -> list[AuditLogEntry]:
        """Audit fields of every user in insertion order. Never includes password hashes."""
        rows = (
            self.session.query(
                User.id, User.username, User.role, User.last_login, User.last_ip
            )
            .order_by(User.id)
            .all()
        )
        return [
            AuditLogEntry(
                id=r.id,
                username=r.username,
                role=r.role,
                last_login=r.last_login,
                last_ip=r.last_ip,
            )
            for r in rows
        ]
