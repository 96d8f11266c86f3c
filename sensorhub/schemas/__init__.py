"""Pydantic request/response schemas."""

from sensorhub.schemas.auth import (
    AuditLogEntry,
    LoginRequest,
    RegisterRequest,
    TokenClaims,
    TokenResponse,
    UserView,
)
from sensorhub.schemas.control import (
    ControlStatus,
    ControlToggleResponse,
    ControlUpdateRequest,
    ControlUpdateResponse,
    DeviceSummary,
)
from sensorhub.schemas.distance import (
    CleanupResult,
    DistanceReading,
    DistanceReadingIn,
    DistanceStatistics,
    InsertedReading,
    SourcedDistanceReading,
)
from sensorhub.schemas.health import HealthResponse

__all__ = [
    "AuditLogEntry",
    "CleanupResult",
    "ControlStatus",
    "ControlToggleResponse",
    "ControlUpdateRequest",
    "ControlUpdateResponse",
    "DeviceSummary",
    "DistanceReading",
    "DistanceReadingIn",
    "DistanceStatistics",
    "HealthResponse",
    "InsertedReading",
    "LoginRequest",
    "RegisterRequest",
    "SourcedDistanceReading",
    "TokenClaims",
    "TokenResponse",
    "UserView",
]
