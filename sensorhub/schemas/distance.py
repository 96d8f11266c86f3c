"""Pydantic schemas for sensor distance readings: device ingestion and dashboard reads."""

import math
from datetime import datetime
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, StrictFloat, StrictInt, StrictStr, field_validator

SensorSource = Literal["distance1", "distance2"]

STATUS_VALUES: frozenset[str] = frozenset({"online", "offline", "1", "0", "true", "false"})


class DistanceReadingIn(BaseModel):
    """Reading pushed by a sensor. distances must be a JSON number, status a JSON string."""

    distances: StrictInt | StrictFloat = Field(..., description="Measured distance (>= 0)")
    status: StrictStr = Field(..., description="Sensor status")

    @field_validator("distances")
    @classmethod
    def validate_distances(cls, v: int | float) -> int | float:
        try:
            finite = math.isfinite(v)
        except OverflowError:
            finite = False
        if not finite:
            raise ValueError("distances must be a finite number")
        if v < 0:
            raise ValueError("distances must be a positive number")
        return v

    @field_validator("status")
    @classmethod
    def validate_status(cls, v: str) -> str:
        if v.lower() not in STATUS_VALUES:
            raise ValueError(
                "status must be one of: online, offline, 1, 0, true, false"
            )
        return v


class DistanceReading(BaseModel):
    """Stored reading from a single sensor table."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    distances: float
    status: str
    timestamp: datetime


class SourcedDistanceReading(DistanceReading):
    """Reading from the merged view of both sensors."""

    source: SensorSource


class InsertedReading(BaseModel):
    """Confirmation returned to a sensor after ingestion."""

    message: str
    id: int
    distances: float
    status: str
    timestamp: datetime
    sensor: str


class DistanceStatistics(BaseModel):
    """Aggregates over one sensor's readings within a time window."""

    sensor: str
    period_hours: int
    total_readings: int
    avg_distance: float
    min_distance: float
    max_distance: float
    online_percentage: float
    offline_percentage: float


class CleanupResult(BaseModel):
    message: str
    deleted_records: int
    sensor: str
    days_kept: int
