"""Telemetry store: ingestion, queries, aggregates and cleanup for the distance sensors."""

import logging
from datetime import UTC, datetime, timedelta

from sqlalchemy import String, case, func, literal, select, union_all
from sqlalchemy.orm import Session

from sensorhub.core.errors import NotFound, ValidationError
from sensorhub.models import SENSOR_MODELS
from sensorhub.schemas.distance import (
    CleanupResult,
    DistanceReading,
    DistanceReadingIn,
    DistanceStatistics,
    InsertedReading,
    SourcedDistanceReading,
)

logger = logging.getLogger(__name__)

# Status values counted as online / offline in statistics (compared lower-cased).
ONLINE_STATUSES = ("online", "1")
OFFLINE_STATUSES = ("offline", "0")


def sensor_model(sensor: str):
    """Return the ORM model for sensor ('1' or '2'); ValidationError otherwise."""
    model = SENSOR_MODELS.get(sensor)
    if model is None:
        raise ValidationError(
            f"Invalid sensor type. Must be one of {sorted(SENSOR_MODELS)}"
        )
    return model


class DistanceStore:
    def __init__(self, session: Session) -> None:
        self.session = session

    def list_readings(self, sensor: str, limit: int) -> list[DistanceReading]:
        """Most recent readings first, at most limit rows."""
        model = sensor_model(sensor)
        rows = (
            self.session.query(model)
            .order_by(model.timestamp.desc(), model.id.desc())
            .limit(limit)
            .all()
        )
        return [DistanceReading.model_validate(r) for r in rows]

    def insert_reading(self, sensor: str, reading: DistanceReadingIn) -> InsertedReading:
        model = sensor_model(sensor)
        row = model(distances=reading.distances, status=reading.status)
        self.session.add(row)
        self.session.commit()
        self.session.refresh(row)
        logger.info(
            "Reading stored: sensor=%s id=%s distances=%s status=%s",
            sensor, row.id, row.distances, row.status,
        )
        return InsertedReading(
            message=f"Distance{sensor} data inserted successfully",
            id=row.id,
            distances=row.distances,
            status=row.status,
            timestamp=row.timestamp,
            sensor=sensor,
        )

    def list_all(self, limit: int) -> list[SourcedDistanceReading]:
        """Readings of every sensor merged into one most-recent-first list."""
        selects = [
            select(
                literal(f"distance{sensor}", type_=String).label("source"),
                model.id,
                model.distances,
                model.status,
                model.timestamp,
            )
            for sensor, model in SENSOR_MODELS.items()
        ]
        merged = union_all(*selects).subquery()
        stmt = (
            select(merged)
            .order_by(merged.c.timestamp.desc(), merged.c.id.desc())
            .limit(limit)
        )
        rows = self.session.execute(stmt).mappings().all()
        return [SourcedDistanceReading.model_validate(dict(r)) for r in rows]

    def latest_reading(self, sensor: str) -> DistanceReading:
        """Newest reading for sensor. Raises NotFound if the sensor has no data."""
        readings = self.list_readings(sensor, 1)
        if not readings:
            raise NotFound(f"No data found for sensor {sensor}")
        return readings[0]

    def statistics(self, sensor: str, hours: int) -> DistanceStatistics:
        """Count, avg/min/max distance and online/offline share over the last `hours`."""
        model = sensor_model(sensor)
        cutoff = datetime.now(UTC) - timedelta(hours=hours)
        status = func.lower(model.status)
        row = self.session.execute(
            select(
                func.count(model.id).label("total"),
                func.avg(model.distances).label("avg"),
                func.min(model.distances).label("min"),
                func.max(model.distances).label("max"),
                func.sum(case((status.in_(ONLINE_STATUSES), 1), else_=0)).label("online"),
                func.sum(case((status.in_(OFFLINE_STATUSES), 1), else_=0)).label("offline"),
            ).where(model.timestamp >= cutoff)
        ).one()

        total = row.total or 0
        online_pct = round(row.online / total * 100, 2) if total else 0.0
        offline_pct = round(row.offline / total * 100, 2) if total else 0.0
        return DistanceStatistics(
            sensor=sensor,
            period_hours=hours,
            total_readings=total,
            avg_distance=float(row.avg or 0),
            min_distance=float(row.min or 0),
            max_distance=float(row.max or 0),
            online_percentage=online_pct,
            offline_percentage=offline_pct,
        )

    def cleanup(self, sensor: str, days: int) -> CleanupResult:
        """Delete readings older than `days`. Idempotent."""
        model = sensor_model(sensor)
        cutoff = datetime.now(UTC) - timedelta(days=days)
        deleted = (
            self.session.query(model)
            .filter(model.timestamp < cutoff)
            .delete(synchronize_session=False)
        )
        self.session.commit()
        if deleted > 0:
            logger.info(
                "Cleanup: table=%s cutoff=%s deleted=%s",
                model.__tablename__, cutoff.isoformat(), deleted,
            )
        return CleanupResult(
            message=f"Cleaned up old data from {model.__tablename__}",
            deleted_records=deleted,
            sensor=sensor,
            days_kept=days,
        )
