"""Customer CRUD endpoints."""

from fastapi import Depends, Query, status

from servobill.application.schemas import CustomerCreate, CustomerResponse, CustomerUpdate
from servobill.application.services import CustomerService
from servobill.domain.exceptions import DomainValidationError, EntityNotFoundError
from servobill.infrastructure.dependencies import get_customer_service
from servobill.presentation.api.v1.routing import (
    Route,
    build_router,
    not_found,
    page_limit,
    unprocessable,
)


async def list_customers(
    search: str | None = Query(None, description="Case-insensitive name substring"),
    skip: int = Query(0, ge=0),
    limit: int | None = Query(None, ge=1),
    service: CustomerService = Depends(get_customer_service),
) -> list[CustomerResponse]:
    customers = await service.list_customers(search=search, skip=skip, limit=page_limit(limit))
    return [CustomerResponse.model_validate(c, from_attributes=True) for c in customers]


async def get_customer(
    customer_id: str,
    service: CustomerService = Depends(get_customer_service),
) -> CustomerResponse:
    try:
        customer = await service.get_customer(customer_id)
    except EntityNotFoundError as e:
        raise not_found(e)
    return CustomerResponse.model_validate(customer, from_attributes=True)


async def create_customer(
    data: CustomerCreate,
    service: CustomerService = Depends(get_customer_service),
) -> CustomerResponse:
    try:
        customer = await service.create_customer(data)
    except DomainValidationError as e:
        raise unprocessable(e)
    return CustomerResponse.model_validate(customer, from_attributes=True)


async def update_customer(
    customer_id: str,
    data: CustomerUpdate,
    service: CustomerService = Depends(get_customer_service),
) -> CustomerResponse:
    try:
        customer = await service.update_customer(customer_id, data)
    except EntityNotFoundError as e:
        raise not_found(e)
    except DomainValidationError as e:
        raise unprocessable(e)
    return CustomerResponse.model_validate(customer, from_attributes=True)


async def delete_customer(
    customer_id: str,
    service: CustomerService = Depends(get_customer_service),
) -> CustomerResponse:
    try:
        customer = await service.delete_customer(customer_id)
    except EntityNotFoundError as e:
        raise not_found(e)
    return CustomerResponse.model_validate(customer, from_attributes=True)


ROUTES = [
    Route("listCustomers", "GET", "", list_customers, list[CustomerResponse]),
    Route("getCustomer", "GET", "/{customer_id}", get_customer, CustomerResponse),
    Route(
        "createCustomer", "POST", "", create_customer, CustomerResponse,
        status_code=status.HTTP_201_CREATED, mutation=True,
    ),
    Route("updateCustomer", "PUT", "/{customer_id}", update_customer, CustomerResponse, mutation=True),
    Route("deleteCustomer", "DELETE", "/{customer_id}", delete_customer, CustomerResponse, mutation=True),
]

router = build_router("/customers", "Customers", ROUTES)
