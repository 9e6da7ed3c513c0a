"""Product catalogue endpoints."""

from fastapi import Depends, HTTPException, Query, status

from servobill.application.schemas import (
    ProductInput,
    ProductResponse,
    ProductUpdate,
    ProductWhereInput,
)
from servobill.application.services import ProductService
from servobill.domain.exceptions import DomainValidationError, EntityNotFoundError
from servobill.infrastructure.dependencies import get_product_service
from servobill.presentation.api.v1.routing import (
    Route,
    build_router,
    not_found,
    page_limit,
    unprocessable,
)


async def list_products(
    category: str | None = Query(None, description="Exact category"),
    search: str | None = Query(None, description="Case-insensitive name substring"),
    skip: int = Query(0, ge=0),
    limit: int | None = Query(None, ge=1),
    service: ProductService = Depends(get_product_service),
) -> list[ProductResponse]:
    """List products sorted by category, then name."""
    products = await service.list_products(
        where=ProductWhereInput(category=category, search=search),
        skip=skip,
        limit=page_limit(limit),
    )
    return [ProductResponse.model_validate(p, from_attributes=True) for p in products]


async def get_product(
    product_id: str,
    service: ProductService = Depends(get_product_service),
) -> ProductResponse:
    product = await service.get_product(product_id)
    if product is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Product with id '{product_id}' not found",
        )
    return ProductResponse.model_validate(product, from_attributes=True)


async def create_product(
    data: ProductInput,
    service: ProductService = Depends(get_product_service),
) -> ProductResponse:
    try:
        product = await service.create_product(data)
    except DomainValidationError as e:
        raise unprocessable(e)
    return ProductResponse.model_validate(product, from_attributes=True)


async def update_product(
    product_id: str,
    data: ProductUpdate,
    service: ProductService = Depends(get_product_service),
) -> ProductResponse:
    """Change only the fields present in the request body."""
    try:
        product = await service.update_product(product_id, data)
    except EntityNotFoundError as e:
        raise not_found(e)
    except DomainValidationError as e:
        raise unprocessable(e)
    return ProductResponse.model_validate(product, from_attributes=True)


async def delete_product(
    product_id: str,
    service: ProductService = Depends(get_product_service),
) -> ProductResponse:
    """Delete a product and return what was deleted."""
    try:
        product = await service.delete_product(product_id)
    except EntityNotFoundError as e:
        raise not_found(e)
    return ProductResponse.model_validate(product, from_attributes=True)


ROUTES = [
    Route("listProducts", "GET", "", list_products, list[ProductResponse]),
    Route("getProduct", "GET", "/{product_id}", get_product, ProductResponse),
    Route(
        "createProduct", "POST", "", create_product, ProductResponse,
        status_code=status.HTTP_201_CREATED, mutation=True,
    ),
    Route("updateProduct", "PUT", "/{product_id}", update_product, ProductResponse, mutation=True),
    Route("deleteProduct", "DELETE", "/{product_id}", delete_product, ProductResponse, mutation=True),
]

router = build_router("/products", "Products", ROUTES)
