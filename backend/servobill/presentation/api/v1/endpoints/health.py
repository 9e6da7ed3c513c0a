"""Health check endpoint — no dependencies, always available."""

from servobill.config import get_settings
from servobill.presentation.api.v1.routing import Route, build_router


async def health_check() -> dict:
    """Returns the current application health status."""
    settings = get_settings()
    return {
        "status": "healthy",
        "version": settings.app_version,
        "environment": settings.app_env,
    }


ROUTES = [
    Route("health", "GET", "/health", health_check),
]

router = build_router("", "Health", ROUTES)
