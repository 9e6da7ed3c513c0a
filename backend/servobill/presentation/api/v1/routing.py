"""Route tables — each resource lists its operations explicitly and
``build_router`` registers them on an APIRouter at startup."""

from collections.abc import Callable, Sequence
from dataclasses import dataclass
from typing import Any

from fastapi import APIRouter, Depends, HTTPException, status

from servobill.config import get_settings
from servobill.domain.exceptions import DomainValidationError, EntityNotFoundError
from servobill.infrastructure.dependencies import require_authorized


@dataclass(frozen=True)
class Route:
    """One operation: its public name, HTTP binding, handler and response shape."""

    name: str
    method: str
    path: str
    endpoint: Callable[..., Any]
    response_model: Any = None
    status_code: int = status.HTTP_200_OK
    mutation: bool = False


def build_router(prefix: str, tag: str, routes: Sequence[Route]) -> APIRouter:
    router = APIRouter(prefix=prefix, tags=[tag])
    for route in routes:
        router.add_api_route(
            route.path,
            route.endpoint,
            methods=[route.method],
            name=route.name,
            response_model=route.response_model,
            status_code=route.status_code,
            dependencies=[Depends(require_authorized)] if route.mutation else None,
        )
    return router


def page_limit(limit: int | None) -> int:
    """Apply the configured default and ceiling to a requested page size."""
    settings = get_settings()
    return min(limit or settings.default_page_size, settings.max_page_size)


def not_found(e: EntityNotFoundError) -> HTTPException:
    return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))


def unprocessable(e: DomainValidationError) -> HTTPException:
    return HTTPException(status_code=422, detail=str(e))
