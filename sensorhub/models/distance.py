"""ORM models for raw distance readings pushed by the two sensors."""

from datetime import UTC, datetime

from sqlalchemy import Column, DateTime, Float, Integer, String, func

from sensorhub.models.base import Base


def _utcnow() -> datetime:
    return datetime.now(UTC)


class DistanceReadingMixin:
    """Columns shared by every sensor table (one table per sensor)."""

    id = Column(Integer, primary_key=True, autoincrement=True)
    distances = Column(Float, nullable=False)
    status = Column(String(16), nullable=False)
    timestamp = Column(
        DateTime(timezone=True),
        nullable=False,
        index=True,
        default=_utcnow,
        server_default=func.now(),
    )


class Distance1(DistanceReadingMixin, Base):
    __tablename__ = "distance1"


class Distance2(DistanceReadingMixin, Base):
    __tablename__ = "distance2"


# Sensor id as used in routes -> ORM model.
SENSOR_MODELS: dict[str, type[DistanceReadingMixin]] = {
    "1": Distance1,
    "2": Distance2,
}
