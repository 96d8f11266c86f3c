"""Pydantic schemas for the controlled device (TV switch)."""

from datetime import datetime
from typing import Any

from pydantic import BaseModel, Field, field_validator


def parse_tv_value(value: Any) -> int:
    """Map an accepted TV value (0, 1, "0", "1", true, false) to 0 or 1."""
    if isinstance(value, bool):
        return int(value)
    if isinstance(value, int) and value in (0, 1):
        return value
    if isinstance(value, str) and value in ("0", "1"):
        return int(value)
    raise ValueError("TV value must be 0, 1, true, or false")


class ControlStatus(BaseModel):
    TV: int = Field(..., description="0 = off, 1 = on")


class ControlUpdateRequest(BaseModel):
    """New TV state from the dashboard."""

    TV: int = Field(..., description="0, 1, \"0\", \"1\", true or false")

    @field_validator("TV", mode="before")
    @classmethod
    def validate_tv(cls, v: Any) -> int:
        return parse_tv_value(v)


class ControlUpdateResponse(BaseModel):
    message: str
    TV: int
    updated_at: datetime


class ControlToggleResponse(ControlUpdateResponse):
    previous_value: int
    new_value: int


class DeviceState(BaseModel):
    status: str
    value: int
    last_updated: datetime | None = None


class DeviceSummary(BaseModel):
    devices: dict[str, DeviceState]
    total_devices: int
    active_devices: int
    summary: str
