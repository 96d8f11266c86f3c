"""SQLAlchemy ORM models."""

from sensorhub.models.base import Base
from sensorhub.models.control import SwitchCondition
from sensorhub.models.distance import SENSOR_MODELS, Distance1, Distance2
from sensorhub.models.user import User

__all__ = ["Base", "Distance1", "Distance2", "SENSOR_MODELS", "SwitchCondition", "User"]
