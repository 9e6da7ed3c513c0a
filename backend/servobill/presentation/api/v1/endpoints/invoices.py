"""Invoice CRUD endpoints and the totals view."""

from fastapi import Depends, Query, status

from servobill.application.schemas import (
    InvoiceCreate,
    InvoiceResponse,
    InvoiceTotalsResponse,
    InvoiceUpdate,
)
from servobill.application.services import InvoiceService
from servobill.domain.exceptions import DomainValidationError, EntityNotFoundError
from servobill.infrastructure.dependencies import get_invoice_service
from servobill.presentation.api.v1.routing import (
    Route,
    build_router,
    not_found,
    page_limit,
    unprocessable,
)


async def list_invoices(
    customer_id: str | None = Query(None, description="Filter by customer ID"),
    skip: int = Query(0, ge=0),
    limit: int | None = Query(None, ge=1),
    service: InvoiceService = Depends(get_invoice_service),
) -> list[InvoiceResponse]:
    invoices = await service.list_invoices(customer_id=customer_id, skip=skip, limit=page_limit(limit))
    return [InvoiceResponse.model_validate(i, from_attributes=True) for i in invoices]


async def get_invoice(
    invoice_id: str,
    service: InvoiceService = Depends(get_invoice_service),
) -> InvoiceResponse:
    try:
        invoice = await service.get_invoice(invoice_id)
    except EntityNotFoundError as e:
        raise not_found(e)
    return InvoiceResponse.model_validate(invoice, from_attributes=True)


async def get_invoice_totals(
    invoice_id: str,
    service: InvoiceService = Depends(get_invoice_service),
) -> InvoiceTotalsResponse:
    """Subtotal, tax and total in cents plus display strings."""
    try:
        return await service.get_invoice_totals(invoice_id)
    except EntityNotFoundError as e:
        raise not_found(e)


async def create_invoice(
    data: InvoiceCreate,
    service: InvoiceService = Depends(get_invoice_service),
) -> InvoiceResponse:
    try:
        invoice = await service.create_invoice(data)
    except DomainValidationError as e:
        raise unprocessable(e)
    return InvoiceResponse.model_validate(invoice, from_attributes=True)


async def update_invoice(
    invoice_id: str,
    data: InvoiceUpdate,
    service: InvoiceService = Depends(get_invoice_service),
) -> InvoiceResponse:
    try:
        invoice = await service.update_invoice(invoice_id, data)
    except EntityNotFoundError as e:
        raise not_found(e)
    except DomainValidationError as e:
        raise unprocessable(e)
    return InvoiceResponse.model_validate(invoice, from_attributes=True)


async def delete_invoice(
    invoice_id: str,
    service: InvoiceService = Depends(get_invoice_service),
) -> InvoiceResponse:
    try:
        invoice = await service.delete_invoice(invoice_id)
    except EntityNotFoundError as e:
        raise not_found(e)
    return InvoiceResponse.model_validate(invoice, from_attributes=True)


ROUTES = [
    Route("listInvoices", "GET", "", list_invoices, list[InvoiceResponse]),
    Route("getInvoice", "GET", "/{invoice_id}", get_invoice, InvoiceResponse),
    Route("getInvoiceTotals", "GET", "/{invoice_id}/totals", get_invoice_totals, InvoiceTotalsResponse),
    Route(
        "createInvoice", "POST", "", create_invoice, InvoiceResponse,
        status_code=status.HTTP_201_CREATED, mutation=True,
    ),
    Route("updateInvoice", "PUT", "/{invoice_id}", update_invoice, InvoiceResponse, mutation=True),
    Route("deleteInvoice", "DELETE", "/{invoice_id}", delete_invoice, InvoiceResponse, mutation=True),
]

router = build_router("/invoices", "Invoices", ROUTES)
