"""FastAPI dependency injection — wires infrastructure to application layer."""

import secrets
from collections.abc import AsyncGenerator

from fastapi import Depends, Header, HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession

from servobill.application.services import CustomerService, InvoiceService, ProductService
from servobill.config import get_settings
from servobill.domain.exceptions import UnauthorizedError
from servobill.infrastructure.database.repositories import (
    SQLAlchemyCustomerRepository,
    SQLAlchemyInvoiceRepository,
    SQLAlchemyProductRepository,
)
from servobill.infrastructure.database.session import get_db_session


async def get_product_service(
    session: AsyncSession = Depends(get_db_session),
) -> AsyncGenerator[ProductService, None]:
    """Provides a ProductService instance with its repository wired up."""
    yield ProductService(SQLAlchemyProductRepository(session))


async def get_customer_service(
    session: AsyncSession = Depends(get_db_session),
) -> AsyncGenerator[CustomerService, None]:
    """Provides a CustomerService instance with its repository wired up."""
    yield CustomerService(SQLAlchemyCustomerRepository(session))


async def get_invoice_service(
    session: AsyncSession = Depends(get_db_session),
) -> AsyncGenerator[InvoiceService, None]:
    """Provides an InvoiceService using the configured currency symbol."""
    settings = get_settings()
    yield InvoiceService(
        SQLAlchemyInvoiceRepository(session),
        currency_symbol=settings.currency_symbol,
    )


def check_api_key(provided: str | None) -> None:
    """Raise UnauthorizedError unless ``provided`` matches the configured key."""
    expected = get_settings().api_key
    if not expected:
        return
    if provided is None or not secrets.compare_digest(provided, expected):
        raise UnauthorizedError("Missing or invalid API key")


async def require_authorized(
    x_api_key: str | None = Header(None),
) -> None:
    """Guard for mutation routes; the use cases assume it already ran."""
    try:
        check_api_key(x_api_key)
    except UnauthorizedError as e:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail=str(e))
