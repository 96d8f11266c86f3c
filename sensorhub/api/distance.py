"""Distance routes: anonymous sensor ingestion and role-gated dashboard reads."""

from typing import Annotated, Literal

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from sensorhub.api.auth import bearer_token, require_roles
from sensorhub.core.config import settings
from sensorhub.core.database import get_db
from sensorhub.core.roles import SENSOR_READER_ROLES, Role
from sensorhub.schemas.auth import TokenClaims
from sensorhub.schemas.distance import (
    CleanupResult,
    DistanceReading,
    DistanceReadingIn,
    DistanceStatistics,
    InsertedReading,
    SourcedDistanceReading,
)
from sensorhub.services.rbac import authorize
from sensorhub.services.telemetry import DistanceStore

router = APIRouter()

SensorId = Literal["1", "2"]

Limit = Annotated[int | None, Query(ge=1, le=settings.DISTANCE_MAX_LIMIT)]


def get_distance_store(db: Annotated[Session, Depends(get_db)]) -> DistanceStore:
    return DistanceStore(db)


def require_sensor_reader(
    sensor: SensorId,
    token: Annotated[str | None, Depends(bearer_token)],
) -> TokenClaims:
    """RBAC gate for per-sensor reads: admin-distance<N> or super-admin."""
    return authorize(SENSOR_READER_ROLES[sensor], token)


@router.get("/all", response_model=list[SourcedDistanceReading])
def get_all_distances(
    _claims: Annotated[TokenClaims, Depends(require_roles(Role.SUPER_ADMIN))],
    store: Annotated[DistanceStore, Depends(get_distance_store)],
    limit: Limit = None,
) -> list[SourcedDistanceReading]:
    """Readings of both sensors merged, most recent first (super-admin only)."""
    return store.list_all(limit or settings.DISTANCE_ALL_DEFAULT_LIMIT)


@router.get("/{sensor}", response_model=list[DistanceReading])
def get_distances(
    sensor: SensorId,
    _claims: Annotated[TokenClaims, Depends(require_sensor_reader)],
    store: Annotated[DistanceStore, Depends(get_distance_store)],
    limit: Limit = None,
) -> list[DistanceReading]:
    """Readings of one sensor, most recent first."""
    return store.list_readings(sensor, limit or settings.DISTANCE_DEFAULT_LIMIT)


@router.post("/{sensor}", response_model=InsertedReading, status_code=status.HTTP_201_CREATED)
def post_distance(
    sensor: SensorId,
    body: DistanceReadingIn,
    store: Annotated[DistanceStore, Depends(get_distance_store)],
) -> InsertedReading:
    """Device ingestion. Intentionally unauthenticated: the physical sensors post here."""
    return store.insert_reading(sensor, body)


@router.get("/{sensor}/latest", response_model=DistanceReading)
def get_latest_reading(
    sensor: SensorId,
    _claims: Annotated[TokenClaims, Depends(require_sensor_reader)],
    store: Annotated[DistanceStore, Depends(get_distance_store)],
) -> DistanceReading:
    return store.latest_reading(sensor)


@router.get("/{sensor}/stats", response_model=DistanceStatistics)
def get_statistics(
    sensor: SensorId,
    _claims: Annotated[TokenClaims, Depends(require_sensor_reader)],
    store: Annotated[DistanceStore, Depends(get_distance_store)],
    hours: Annotated[int, Query(ge=1, le=8760)] = 24,
) -> DistanceStatistics:
    """Count, average/min/max and online/offline share over the last `hours`."""
    return store.statistics(sensor, hours)


@router.delete("/{sensor}/readings", response_model=CleanupResult)
def delete_old_readings(
    sensor: SensorId,
    _claims: Annotated[TokenClaims, Depends(require_roles(Role.SUPER_ADMIN))],
    store: Annotated[DistanceStore, Depends(get_distance_store)],
    days: Annotated[int, Query(ge=1, le=3650)] = 30,
) -> CleanupResult:
    """Delete readings older than `days` (super-admin only)."""
    return store.cleanup(sensor, days)
