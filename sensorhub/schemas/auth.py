"""Request/response schemas for auth endpoints and token claims."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class RegisterRequest(BaseModel):
    """New account. Fields are optional here so missing ones surface as one clear 400."""

    username: str | None = Field(default=None, max_length=255, description="Username")
    password: str | None = Field(default=None, max_length=72, description="Password")
    role: str | None = Field(default=None, description="Role identifier")


class LoginRequest(BaseModel):
    """Credentials for login."""

    username: str | None = Field(default=None, max_length=255, description="Username")
    password: str | None = Field(default=None, max_length=128, description="Password")


class UserView(BaseModel):
    """User without credentials; safe to return to any caller."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    username: str
    role: str


class TokenResponse(BaseModel):
    """JWT access token returned after successful login."""

    token: str = Field(..., description="JWT access token (send as Authorization: Bearer <token>)")
    role: str = Field(..., description="Role embedded in the token")
    user: UserView


class AuditLogEntry(BaseModel):
    """One user's login audit fields (GET /auth/logs, super-admin only)."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    username: str
    role: str
    last_login: datetime | None = None
    last_ip: str | None = None


class TokenClaims(BaseModel):
    """Verified claims of a presented access token."""

    user_id: int
    role: str
    issued_at: datetime
    expires_at: datetime
