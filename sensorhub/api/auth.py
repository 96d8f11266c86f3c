"""Register/login/audit-log routes and the RBAC gate dependency (require_roles)."""

from collections.abc import Callable
from typing import Annotated

from fastapi import APIRouter, Depends, Request, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session

from sensorhub.core.database import get_db
from sensorhub.core.roles import Role
from sensorhub.schemas.auth import (
    AuditLogEntry,
    LoginRequest,
    RegisterRequest,
    TokenClaims,
    TokenResponse,
    UserView,
)
from sensorhub.services.audit import AuditRecorder
from sensorhub.services.authenticator import Authenticator
from sensorhub.services.credential_store import CredentialStore
from sensorhub.services.rbac import authorize

router = APIRouter()
security = HTTPBearer(auto_error=False)


def client_ip(request: Request) -> str:
    """Caller address: first X-Forwarded-For hop, else the socket peer, else 'unknown'."""
    forwarded = request.headers.get("x-forwarded-for", "")
    first_hop = forwarded.split(",")[0].strip()
    if first_hop:
        return first_hop
    if request.client is not None and request.client.host:
        return request.client.host
    return "unknown"


def get_audit_recorder(db: Annotated[Session, Depends(get_db)]) -> AuditRecorder:
    return AuditRecorder(CredentialStore(db))


def get_authenticator(
    audit: Annotated[AuditRecorder, Depends(get_audit_recorder)],
) -> Authenticator:
    return Authenticator(audit.store, audit)


def bearer_token(
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(security)],
) -> str | None:
    """Raw token from 'Authorization: Bearer <token>', or None if absent."""
    return credentials.credentials if credentials is not None else None


def require_roles(*roles: Role) -> Callable[..., TokenClaims]:
    """
    Build a dependency that admits only tokens whose role is in roles.

    Missing/invalid/expired token -> 401, role not allowed -> 403. Routes without
    this dependency are public.
    """
    allowed = tuple(roles)

    def dependency(token: Annotated[str | None, Depends(bearer_token)]) -> TokenClaims:
        return authorize(allowed, token)

    return dependency


@router.post("/register", response_model=UserView, status_code=status.HTTP_201_CREATED)
def register(
    body: RegisterRequest,
    authenticator: Annotated[Authenticator, Depends(get_authenticator)],
) -> UserView:
    """Create a user with username, password and role. No token is issued; log in separately."""
    return authenticator.register(body.username, body.password, body.role)


@router.post("/login", response_model=TokenResponse)
def login(
    body: LoginRequest,
    request: Request,
    authenticator: Annotated[Authenticator, Depends(get_authenticator)],
) -> TokenResponse:
    """
    Authenticate with username and password; returns a JWT valid for one hour.
    Include the token in the Authorization header as: Bearer <token>
    """
    result = authenticator.login(body.username, body.password, client_ip(request))
    return TokenResponse(token=result.token, role=result.role, user=result.user)


@router.get("/logs", response_model=list[AuditLogEntry])
def get_logs(
    _claims: Annotated[TokenClaims, Depends(require_roles(Role.SUPER_ADMIN))],
    audit: Annotated[AuditRecorder, Depends(get_audit_recorder)],
) -> list[AuditLogEntry]:
    """Last login time and address of every user (super-admin only)."""
    return audit.list_log()
