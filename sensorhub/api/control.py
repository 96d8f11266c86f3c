"""Control routes: public status read for the device, super-admin writes from the dashboard."""

from typing import Annotated

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from sensorhub.api.auth import require_roles
from sensorhub.core.database import get_db
from sensorhub.core.roles import Role
from sensorhub.schemas.auth import TokenClaims
from sensorhub.schemas.control import (
    ControlStatus,
    ControlToggleResponse,
    ControlUpdateRequest,
    ControlUpdateResponse,
    DeviceSummary,
)
from sensorhub.services.control import ControlStore

router = APIRouter()

SuperAdmin = Annotated[TokenClaims, Depends(require_roles(Role.SUPER_ADMIN))]


def get_control_store(db: Annotated[Session, Depends(get_db)]) -> ControlStore:
    return ControlStore(db)


@router.get("", response_model=ControlStatus)
def get_control_status(
    store: Annotated[ControlStore, Depends(get_control_store)],
) -> ControlStatus:
    """Current TV state. Public: the controlled device polls this without a token."""
    return store.get_status()


@router.post("", response_model=ControlUpdateResponse)
def update_control_status(
    body: ControlUpdateRequest,
    _claims: SuperAdmin,
    store: Annotated[ControlStore, Depends(get_control_store)],
) -> ControlUpdateResponse:
    return store.update_status(body.TV)


@router.post("/toggle", response_model=ControlToggleResponse)
def toggle_control_status(
    _claims: SuperAdmin,
    store: Annotated[ControlStore, Depends(get_control_store)],
) -> ControlToggleResponse:
    return store.toggle()


@router.get("/summary", response_model=DeviceSummary)
def get_device_summary(
    _claims: SuperAdmin,
    store: Annotated[ControlStore, Depends(get_control_store)],
) -> DeviceSummary:
    return store.summary()
