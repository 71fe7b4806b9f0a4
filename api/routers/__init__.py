"""
Router package for the Workout Tracker API.

This package contains all API routers organized by domain:
- health: Liveness endpoints
- workouts: Workout sessions, exercises and statistics
"""

from api.routers.health import router as health_router
from api.routers.workouts import router as workouts_router

__all__ = [
    "health_router",
    "workouts_router",
]
