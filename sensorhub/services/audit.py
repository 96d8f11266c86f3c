"""Login audit recording. Audit writes are best-effort and never block a login."""

import logging

from sqlalchemy.exc import SQLAlchemyError

from sensorhub.schemas.auth import AuditLogEntry
from sensorhub.services.credential_store import CredentialStore

logger = logging.getLogger(__name__)


class AuditRecorder:
    def __init__(self, store: CredentialStore) -> None:
        self.store = store

    def record_login(self, user_id: int, ip_address: str) -> bool:
        """
        Update last_login / last_ip for user_id.

        Returns False (after logging) when the store write fails; the caller's
        login proceeds either way.
        """
        try:
            self.store.record_login(user_id, ip_address)
        except SQLAlchemyError:
            self.store.session.rollback()
            logger.warning(
                "Login audit write failed: user_id=%s ip=%s", user_id, ip_address, exc_info=True
            )
            return False
        return True

    def list_log(self) -> list[AuditLogEntry]:
        return self.store.list_audit_log()
