"""Health check endpoints.

Routes (under the versioned prefix):
- GET /health                    full report (200 healthy / 503 otherwise)
- GET /health/live               liveness, always 200
- GET /health/ready              readiness on the database (200 / 503)
- GET /health/ping               fixed body, always 200
- GET /health/component/{name}   one component (200 / 503, 404 unknown)

probe_router serves /health/live and /health/ready again without the
version prefix for orchestrator probes.

Health failures are reported in the body, never raised: the only error
response here is the 404 for an unknown component name.
"""

from fastapi import APIRouter, Depends, Request, Response, status

from postservice.api.dependencies.services import get_health_service
from postservice.api.models.health import (
    ComponentHealthResponse,
    HealthResponse,
    LivenessResponse,
    PingResponse,
    ReadinessResponse,
)
from postservice.api.models.post import ErrorResponse
from postservice.api.routes.problems import problem
from postservice.application.dtos.health import HealthStatus
from postservice.application.services.health_service import HealthService

router = APIRouter(prefix="/health", tags=["health"])
probe_router = APIRouter(prefix="/health", tags=["probes"])

_UNAVAILABLE = {503: {"description": "Degraded or unhealthy"}}


def _http_status(health: HealthStatus) -> int:
    """Healthy maps to 200, degraded and unhealthy to 503."""
    if health is HealthStatus.HEALTHY:
        return status.HTTP_200_OK
    return status.HTTP_503_SERVICE_UNAVAILABLE


@router.get(
    "",
    response_model=HealthResponse,
    response_model_exclude_none=True,
    responses=_UNAVAILABLE,
    summary="Full health report",
)
async def get_health(
    response: Response,
    service: HealthService = Depends(get_health_service),
) -> HealthResponse:
    """Check every component and report the worst status."""
    report = await service.get_health()
    response.status_code = _http_status(report.status)
    return HealthResponse.from_dto(report)


async def get_liveness(
    service: HealthService = Depends(get_health_service),
) -> LivenessResponse:
    """Report that the process is alive. Always 200."""
    return LivenessResponse.from_dto(await service.get_liveness())


async def get_readiness(
    response: Response,
    service: HealthService = Depends(get_health_service),
) -> ReadinessResponse:
    """Report whether the service can take traffic (database reachable)."""
    report = await service.get_readiness()
    response.status_code = _http_status(report.status)
    return ReadinessResponse.from_dto(report)


for _router in (router, probe_router):
    _router.add_api_route(
        "/live",
        get_liveness,
        methods=["GET"],
        response_model=LivenessResponse,
        summary="Liveness probe",
    )
    _router.add_api_route(
        "/ready",
        get_readiness,
        methods=["GET"],
        response_model=ReadinessResponse,
        response_model_exclude_none=True,
        responses=_UNAVAILABLE,
        summary="Readiness probe",
    )


@router.get("/ping", response_model=PingResponse, summary="Ping")
async def ping() -> PingResponse:
    """Answer without checking anything."""
    return PingResponse()


@router.get(
    "/component/{name}",
    response_model=ComponentHealthResponse,
    response_model_exclude_none=True,
    responses={
        404: {"model": ErrorResponse, "description": "Unknown component"},
        **_UNAVAILABLE,
    },
    summary="Single component health",
)
async def get_component_health(
    name: str,
    request: Request,
    response: Response,
    service: HealthService = Depends(get_health_service),
) -> ComponentHealthResponse:
    """Check one component by name (database, memory, tasks)."""
    if not service.has_component(name):
        raise problem(
            request,
            status.HTTP_404_NOT_FOUND,
            "component-not-found",
            "Component Not Found",
            f"Unknown component: {name}",
        )
    component = await service.check_component(name)
    response.status_code = _http_status(component.status)
    return ComponentHealthResponse.from_dto(component)
