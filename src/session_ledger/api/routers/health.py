"""Health check endpoint."""

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from session_ledger.api.deps import get_health_service
from session_ledger.api.schemas.health import HealthResponse
from session_ledger.services import HealthService

router = APIRouter(tags=["health"])


@router.get(
    "/health",
    response_model=HealthResponse,
    responses={503: {"model": HealthResponse}},
)
def health_check(health: HealthService = Depends(get_health_service)) -> JSONResponse:
    """Report reachability of the database and the summary cache."""
    status = health.check()
    if status.healthy:
        return JSONResponse(
            status_code=200,
            content={"message": "ok", "services": status.as_dict()},
        )
    return JSONResponse(
        status_code=503,
        content={"message": "Service Unavailable", "services": status.as_dict()},
    )
