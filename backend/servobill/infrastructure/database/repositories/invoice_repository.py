"""Concrete repository implementation for Invoice backed by SQLAlchemy.

Items round-trip through the ``items`` JSON column in list order.
"""

from dataclasses import asdict
from typing import Any

from servobill.application.interfaces import InvoiceRepository
from servobill.domain.entities import Invoice, InvoiceItem
from servobill.infrastructure.database.models import InvoiceModel
from servobill.infrastructure.database.repositories.base import SQLAlchemyRepository, as_utc


class SQLAlchemyInvoiceRepository(SQLAlchemyRepository[Invoice, InvoiceModel], InvoiceRepository):
    """Implements the InvoiceRepository port using SQLAlchemy async sessions."""

    model_class = InvoiceModel

    def _to_entity(self, model: InvoiceModel) -> Invoice:
        return Invoice(
            id=model.id,
            customer_id=model.customer_id,
            number=model.number,
            invoiced_at=model.invoiced_at,
            due_at=model.due_at,
            footer_text=model.footer_text,
            items=[InvoiceItem(**item) for item in model.items or []],
            created_at=as_utc(model.created_at),
            updated_at=as_utc(model.updated_at),
        )

    def _to_values(self, entity: Invoice) -> dict[str, Any]:
        return {
            "id": entity.id,
            "customer_id": entity.customer_id,
            "number": entity.number,
            "invoiced_at": entity.invoiced_at,
            "due_at": entity.due_at,
            "footer_text": entity.footer_text,
            # a fresh list so the JSON column is always seen as changed
            "items": [asdict(item) for item in entity.items],
            "created_at": entity.created_at,
            "updated_at": entity.updated_at,
        }
