"""Health check routes."""

from fastapi import APIRouter, Depends, Request
from user_api.models.health import HealthCheckResponse
from user_api.services import get_user_store
from user_common.services.user_store import UserStore

router = APIRouter(tags=["health"])


@router.get("/health", response_model=HealthCheckResponse)
async def health_check(
    request: Request,
    store: UserStore = Depends(get_user_store),
) -> HealthCheckResponse:
    """Health check endpoint.

    Returns:
        HealthCheckResponse with status, version and visible user count
    """
    settings = request.app.state.settings
    return HealthCheckResponse(
        status="ok",
        version=settings.app_version,
        environment=settings.environment,
        users=store.count(),
    )
