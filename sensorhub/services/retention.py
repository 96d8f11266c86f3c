"""Data retention: delete sensor readings older than RETENTION_DAYS."""

import logging
from typing import TYPE_CHECKING

from sqlalchemy.orm import Session

from sensorhub.models import SENSOR_MODELS
from sensorhub.services.telemetry import DistanceStore

if TYPE_CHECKING:
    from sensorhub.core.config import Settings

logger = logging.getLogger(__name__)


def run_retention(session: Session, settings: "Settings") -> dict[str, int]:
    """
    Delete readings older than RETENTION_DAYS from every sensor table.

    Returns deleted row counts keyed by sensor id. Idempotent: safe to run repeatedly.
    """
    if not settings.RETENTION_ENABLED:
        logger.info("Retention is disabled (RETENTION_ENABLED=false); skipping.")
        return {sensor: 0 for sensor in SENSOR_MODELS}

    store = DistanceStore(session)
    return {
        sensor: store.cleanup(sensor, settings.RETENTION_DAYS).deleted_records
        for sensor in SENSOR_MODELS
    }
