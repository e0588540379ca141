"""API v1 router aggregation."""

from fastapi import APIRouter

from liftlog.api.v1.endpoints import (
    dashboard,
    exercises,
    health,
    profile,
    volume,
    workouts,
)

api_router = APIRouter()

api_router.include_router(health.router, prefix="/health", tags=["health"])
api_router.include_router(exercises.router, prefix="/exercises", tags=["exercises"])
api_router.include_router(workouts.router, prefix="/workouts", tags=["workouts"])
api_router.include_router(volume.router, prefix="/volume", tags=["volume"])
api_router.include_router(profile.router, prefix="/profile", tags=["profile"])
api_router.include_router(dashboard.router, prefix="/dashboard", tags=["dashboard"])
