"""
Router package for the exercise normalization service.

This package contains all API routers organized by domain:
- health: Liveness and readiness endpoints
- exercises: Catalog listing, name matching and suggestions
- workouts: Normalization of extracted workout trees
- plates: Barbell plate math
"""

from api.routers.health import router as health_router
from api.routers.exercises import router as exercises_router
from api.routers.workouts import router as workouts_router
from api.routers.plates import router as plates_router

__all__ = [
    "health_router",
    "exercises_router",
    "workouts_router",
    "plates_router",
]
