"""Core app configuration, database and security primitives."""

from sensorhub.core.config import get_settings, settings
from sensorhub.core.database import get_db

__all__ = ["get_settings", "settings", "get_db"]
