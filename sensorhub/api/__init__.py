"""API routes."""

from fastapi import APIRouter

from sensorhub.api import auth, control, distance, health

router = APIRouter()
router.include_router(health.router, prefix="/health", tags=["health"])
router.include_router(auth.router, prefix="/auth", tags=["auth"])
router.include_router(distance.router, prefix="/distance", tags=["distance"])
router.include_router(control.router, prefix="/control", tags=["control"])
