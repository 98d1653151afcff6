# backend/cube_api/api/routes/__init__.py

from .cubes import router as cubes_router
from .health import router as health_router

routers = [
    health_router,
    cubes_router,
]
