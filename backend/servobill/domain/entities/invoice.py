"""Domain entities — an invoice aggregate and the line items it owns."""

from collections.abc import Mapping
from dataclasses import dataclass, field, fields, replace
from datetime import date, datetime
from typing import Any

from servobill.domain import money
from servobill.domain.exceptions import DomainValidationError, EntityNotFoundError
from servobill.domain.lifecycle import apply_lifecycle_defaults, apply_partial_update, new_id
from servobill.domain.validation import (
    require_cents,
    require_number,
    require_percentage,
    require_str,
)


@dataclass
class InvoiceItem:
    """One line of an invoice.

    Items live inside their invoice and are never stored on their own, so
    ``id`` only has to be unique within the parent's item list.
    """

    name: str = ""
    description: str = ""
    quantity: float = 0
    price_cents: int = 0
    tax_percentage: float = 0
    id: str = field(default_factory=new_id)

    def __post_init__(self) -> None:
        if not self.id:
            self.id = new_id()
        require_str(self.name, "name")
        require_str(self.description, "description")
        require_number(self.quantity, "quantity")
        require_cents(self.price_cents, "price_cents", allow_negative=True)
        require_percentage(self.tax_percentage)

    @property
    def subtotal_cents(self) -> int:
        return money.line_subtotal(self)

    @property
    def tax_cents(self) -> int:
        return money.line_tax(self)

    @property
    def total_cents(self) -> int:
        return self.subtotal_cents + self.tax_cents


def _coerce_item(value: InvoiceItem | Mapping[str, Any]) -> InvoiceItem:
    if isinstance(value, InvoiceItem):
        return value
    if isinstance(value, Mapping):
        return InvoiceItem(**value)
    raise DomainValidationError("must be an invoice item", field="items")


@dataclass
class Invoice:
    """Core domain entity for an invoice.

    Totals are properties over the current ``items``; nothing is cached, so
    any total stored elsewhere is advisory only.
    """

    customer_id: str | None = None
    number: str | None = None
    invoiced_at: date | None = None
    due_at: date | None = None
    footer_text: str | None = None
    items: list[InvoiceItem] = field(default_factory=list)
    id: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None

    def __post_init__(self) -> None:
        self.items = [_coerce_item(item) for item in self.items]
        apply_lifecycle_defaults(self)
        self.validate()

    def validate(self) -> None:
        seen: set[str] = set()
        for item in self.items:
            if item.id in seen:
                raise DomainValidationError(f"duplicate item id '{item.id}'", field="items")
            seen.add(item.id)

    def update(self, **changes: Any) -> None:
        """Merge header fields and/or a replacement item list."""
        apply_partial_update(self, changes)

    # ── Line items ───────────────────────────────────────────────────

    def get_item(self, item_id: str) -> InvoiceItem:
        for item in self.items:
            if item.id == item_id:
                return item
        raise EntityNotFoundError("InvoiceItem", item_id)

    def add_item(self, item: InvoiceItem | None = None) -> InvoiceItem:
        """Append a line (a blank one by default) at the end of the list."""
        item = item or InvoiceItem()
        self.update(items=[*self.items, item])
        return item

    def update_item(self, item_id: str, **changes: Any) -> InvoiceItem:
        """Merge fields into one line; the line keeps its id and position."""
        if "id" in changes:
            raise DomainValidationError("item ids cannot be changed", field="id")
        unknown = set(changes) - {f.name for f in fields(InvoiceItem)}
        if unknown:
            raise DomainValidationError("unknown field for InvoiceItem", field=sorted(unknown)[0])
        current = self.get_item(item_id)
        replacement = replace(current, **changes)
        self.update(items=[replacement if i is current else i for i in self.items])
        return replacement

    def remove_item(self, item_id: str) -> InvoiceItem:
        item = self.get_item(item_id)
        self.update(items=[i for i in self.items if i is not item])
        return item

    # ── Totals ───────────────────────────────────────────────────────

    @property
    def subtotal_cents(self) -> int:
        return money.subtotal(self.items)

    @property
    def tax_cents(self) -> int:
        return money.tax_total(self.items)

    @property
    def total_cents(self) -> int:
        return money.total(self.items)
