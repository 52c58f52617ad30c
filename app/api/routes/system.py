from fastapi import APIRouter, Request
from infrastructure.services import SettingsDep
from api.dependencies.rate_limits import get_limiter, health_limit

router = APIRouter(tags=["System"])
limiter = get_limiter()


# Load balancer and uptime checks poll these endpoints continuously, hence the
# separate, more generous rate limit.
@router.get("/version")
@limiter.limit(health_limit)
def get_version(request: Request, settings: SettingsDep):  # pylint: disable=unused-argument
    """Get the version of the application."""
    return {"version": settings.GIT_SHA}


@router.get("/health")
@limiter.limit(health_limit)
def get_health(request: Request):  # pylint: disable=unused-argument
    """Healthcheck endpoint."""
    return {"status": "healthy"}
