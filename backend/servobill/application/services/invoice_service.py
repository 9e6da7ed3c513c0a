"""Application service (use case) for Invoice operations and totals."""

import logging
from typing import Any

from servobill.application.interfaces import InvoiceRepository
from servobill.application.schemas import (
    InvoiceCreate,
    InvoiceItemInput,
    InvoiceTotalsResponse,
    InvoiceUpdate,
)
from servobill.domain import money
from servobill.domain.entities import Invoice, InvoiceItem
from servobill.domain.exceptions import EntityNotFoundError

logger = logging.getLogger(__name__)


def _to_items(items: list[InvoiceItemInput]) -> list[InvoiceItem]:
    return [InvoiceItem(**item.model_dump()) for item in items]


class InvoiceService:
    """Orchestrates invoice CRUD logic and exposes derived totals."""

    def __init__(self, repository: InvoiceRepository, currency_symbol: str = "€"):
        self._repository = repository
        self._currency_symbol = currency_symbol

    async def list_invoices(
        self,
        customer_id: str | None = None,
        skip: int = 0,
        limit: int = 100,
    ) -> list[Invoice]:
        where = {"customer_id": customer_id} if customer_id else None
        return await self._repository.list_by_query(where=where, skip=skip, limit=limit)

    async def get_invoice(self, invoice_id: str) -> Invoice:
        invoice = await self._repository.get_by_id(invoice_id)
        if invoice is None:
            logger.debug("Invoice %s not found", invoice_id)
            raise EntityNotFoundError("Invoice", invoice_id)
        return invoice

    async def create_invoice(self, data: InvoiceCreate) -> Invoice:
        fields = data.model_dump(exclude={"items"})
        invoice = self._repository.create(**fields, items=_to_items(data.items))
        await self._repository.save(invoice)
        logger.info("Created invoice %s with %d item(s)", invoice.id, len(invoice.items))
        return invoice

    async def update_invoice(self, invoice_id: str, data: InvoiceUpdate) -> Invoice:
        invoice = await self.get_invoice(invoice_id)
        changes: dict[str, Any] = data.model_dump(exclude_unset=True, exclude={"items"})
        if "items" in data.model_fields_set:
            changes["items"] = _to_items(data.items or [])
        invoice.update(**changes)
        await self._repository.save(invoice)
        logger.info("Updated invoice %s", invoice.id)
        return invoice

    async def delete_invoice(self, invoice_id: str) -> Invoice:
        invoice = await self.get_invoice(invoice_id)
        await self._repository.delete(invoice_id)
        logger.info("Deleted invoice %s", invoice_id)
        return invoice

    async def get_invoice_totals(self, invoice_id: str) -> InvoiceTotalsResponse:
        invoice = await self.get_invoice(invoice_id)
        return self.totals_for(invoice)

    def totals_for(self, invoice: Invoice) -> InvoiceTotalsResponse:
        """Integer totals for an invoice plus their display strings."""
        subtotal = money.subtotal(invoice.items)
        tax = money.tax_total(invoice.items)
        return InvoiceTotalsResponse(
            subtotal_cents=subtotal,
            tax_cents=tax,
            total_cents=subtotal + tax,
            subtotal=money.format_price(subtotal, self._currency_symbol),
            tax=money.format_price(tax, self._currency_symbol),
            total=money.format_price(subtotal + tax, self._currency_symbol),
        )
