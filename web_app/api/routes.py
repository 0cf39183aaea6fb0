"""API routes implementation."""

from datetime import datetime, timezone

from fastapi import APIRouter, Request, status
from fastapi.responses import JSONResponse

from .schemas import HealthResponse

router = APIRouter()


@router.get(
    "/health",
    response_model=HealthResponse,
    responses={503: {"model": HealthResponse, "description": "Store unreachable"}},
    summary="Health check",
    description="Check if the service and its store are healthy.",
)
async def health_check(request: Request):
    """Health check endpoint for load balancers and monitoring."""
    store = request.app.state.store

    healthy = await store.health_check()

    body = HealthResponse(
        status="healthy" if healthy else "unhealthy",
        database="healthy" if healthy else "unhealthy",
        timestamp=datetime.now(timezone.utc),
    )
    if healthy:
        return body

    return JSONResponse(
        status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
        content=body.model_dump(mode="json"),
    )
