"""ORM model for the controlled device state (single row, id=1)."""

from sqlalchemy import Column, DateTime, Integer, func

from sensorhub.models.base import Base

SWITCH_ROW_ID = 1


class SwitchCondition(Base):
    """Current on/off state of the controlled TV switch."""

    __tablename__ = "switch_condition"

    id = Column(Integer, primary_key=True, autoincrement=False)
    TV = Column(Integer, nullable=False, default=0, server_default="0")
    created_at = Column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
    )
    updated_at = Column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
    )
