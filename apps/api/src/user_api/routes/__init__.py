"""Route initialization module."""

from fastapi import APIRouter
from user_api.routes.health import router as health_router
from user_api.routes.user import router as user_router

# Routes are served at the root, without an /api prefix
api_router = APIRouter()

api_router.include_router(health_router)
api_router.include_router(user_router)


__all__ = ["api_router"]
