"""Control store: single-row state of the controlled TV switch."""

import logging
from datetime import UTC, datetime
from typing import Any

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from sensorhub.core.errors import ValidationError
from sensorhub.models.control import SWITCH_ROW_ID, SwitchCondition
from sensorhub.schemas.control import (
    ControlStatus,
    ControlToggleResponse,
    ControlUpdateResponse,
    DeviceState,
    DeviceSummary,
    parse_tv_value,
)

logger = logging.getLogger(__name__)


class ControlStore:
    def __init__(self, session: Session) -> None:
        self.session = session

    def _row(self) -> SwitchCondition:
        """Return the state row, inserting the default (TV=0) if it does not exist yet."""
        row = self.session.get(SwitchCondition, SWITCH_ROW_ID)
        if row is not None:
            return row
        self.session.add(SwitchCondition(id=SWITCH_ROW_ID, TV=0))
        try:
            self.session.commit()
        except IntegrityError:
            # Another request bootstrapped the row first.
            self.session.rollback()
        else:
            logger.info("Control status initialized: TV=0")
        return self.session.get(SwitchCondition, SWITCH_ROW_ID)

    def get_status(self) -> ControlStatus:
        return ControlStatus(TV=self._row().TV)

    def update_status(self, value: Any) -> ControlUpdateResponse:
        """Set TV to value (0, 1, "0", "1", true or false)."""
        try:
            tv = parse_tv_value(value)
        except ValueError as e:
            raise ValidationError(str(e), cause=e) from e
        row = self._row()
        now = datetime.now(UTC)
        row.TV = tv
        row.updated_at = now
        self.session.commit()
        logger.info("Control status updated: TV=%s", tv)
        return ControlUpdateResponse(
            message="TV control updated successfully",
            TV=tv,
            updated_at=now,
        )

    def toggle(self) -> ControlToggleResponse:
        previous = self._row().TV
        new_value = 0 if previous == 1 else 1
        result = self.update_status(new_value)
        return ControlToggleResponse(
            message=f"TV {'turned ON' if new_value == 1 else 'turned OFF'}",
            TV=result.TV,
            updated_at=result.updated_at,
            previous_value=previous,
            new_value=new_value,
        )

    def summary(self) -> DeviceSummary:
        row = self._row()
        active = 1 if row.TV == 1 else 0
        return DeviceSummary(
            devices={
                "TV": DeviceState(
                    status="ON" if active else "OFF",
                    value=row.TV,
                    last_updated=row.updated_at,
                )
            },
            total_devices=1,
            active_devices=active,
            summary=f"{active} of 1 devices are currently ON",
        )
