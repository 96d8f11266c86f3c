"""
Token validator / RBAC gate.

authorize() is a pure function of (allow-list, token, clock, signing key): it never
touches the database, so a role change only takes effect once previously issued
tokens expire.
"""

from collections.abc import Iterable
from datetime import UTC, datetime

import jwt

from sensorhub.core.errors import Forbidden, Unauthenticated
from sensorhub.core.roles import Role
from sensorhub.core.security import decode_access_token
from sensorhub.schemas.auth import TokenClaims


def verify_token(token: str | None) -> TokenClaims:
    """Check signature, expiry and claim shape. Raises Unauthenticated on any failure."""
    if not token or not token.strip():
        raise Unauthenticated("Not authenticated")
    try:
        payload = decode_access_token(token.strip())
    except jwt.ExpiredSignatureError as e:
        raise Unauthenticated("Token has expired", cause=e) from e
    except jwt.PyJWTError as e:
        raise Unauthenticated("Invalid token", cause=e) from e

    try:
        user_id = int(payload["sub"])
    except (TypeError, ValueError) as e:
        raise Unauthenticated("Invalid token payload", cause=e) from e
    role = payload["role"]
    if not isinstance(role, str) or Role.parse(role) is None:
        raise Unauthenticated("Invalid token payload")
    return TokenClaims(
        user_id=user_id,
        role=role,
        issued_at=datetime.fromtimestamp(payload["iat"], UTC),
        expires_at=datetime.fromtimestamp(payload["exp"], UTC),
    )


def authorize(allowed_roles: Iterable[Role | str], token: str | None) -> TokenClaims:
    """
    Return the token's claims if its role is in allowed_roles.

    Raises Unauthenticated (401) for a missing/invalid/expired token and
    Forbidden (403) for a valid token with a role outside the allow-list.
    """
    claims = verify_token(token)
    allowed = {Role(r).value for r in allowed_roles}
    if claims.role not in allowed:
        raise Forbidden("Insufficient role for this resource")
    return claims
