"""
CLI entrypoint for the sensor data retention job. Run from cron, e.g.:

  python -m sensorhub.retention

Or daily: 0 3 * * * cd /path/to/sensorhub && .venv/bin/python -m sensorhub.retention
"""

import logging
import sys

from sensorhub.core.config import get_settings
from sensorhub.core.database import SessionLocal
from sensorhub.core.log import configure_logging
from sensorhub.services.retention import run_retention

logger = logging.getLogger(__name__)


def main() -> int:
    """Run retention: delete readings older than RETENTION_DAYS."""
    settings = get_settings()
    configure_logging(settings.LOG_LEVEL)
    db = SessionLocal()
    try:
        deleted = run_retention(db, settings)
        logger.info("Retention completed: deleted_by_sensor=%s", deleted)
        return 0
    except Exception as e:
        logger.exception("Retention job failed: %s", e)
        return 1
    finally:
        db.close()


if __name__ == "__main__":
    sys.exit(main())
