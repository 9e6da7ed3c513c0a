"""Pydantic DTOs (Data Transfer Objects) for the Invoice feature."""

from datetime import date, datetime

from pydantic import BaseModel, Field


# ── Line items ───────────────────────────────────────────────────────


class InvoiceItemInput(BaseModel):
    """One line as sent by the client; a missing id is generated."""

    id: str | None = Field(None, max_length=64)
    name: str = ""
    description: str = ""
    quantity: float = Field(0, ge=0, allow_inf_nan=False, examples=[1.5])
    price_cents: int = Field(0, examples=[12000])
    tax_percentage: float = Field(0, ge=0, le=100, allow_inf_nan=False, examples=[19])


class InvoiceItemResponse(BaseModel):
    id: str
    name: str
    description: str
    quantity: float
    price_cents: int
    tax_percentage: float
    subtotal_cents: int
    tax_cents: int
    total_cents: int

    model_config = {"from_attributes": True}


# ── Invoices ─────────────────────────────────────────────────────────


class InvoiceCreate(BaseModel):
    """Schema for creating a new invoice."""

    customer_id: str | None = Field(None, max_length=36)
    number: str | None = Field(None, max_length=50, examples=["2026-0001"])
    invoiced_at: date | None = None
    due_at: date | None = None
    footer_text: str | None = None
    items: list[InvoiceItemInput] = Field(default_factory=list)


class InvoiceUpdate(BaseModel):
    """Schema for updating an invoice — ``items`` replaces the whole list when sent."""

    customer_id: str | None = Field(None, max_length=36)
    number: str | None = Field(None, max_length=50)
    invoiced_at: date | None = None
    due_at: date | None = None
    footer_text: str | None = None
    items: list[InvoiceItemInput] | None = None

    model_config = {"extra": "forbid"}


class InvoiceResponse(BaseModel):
    """Schema returned to the client. Totals are recomputed on every read."""

    id: str
    customer_id: str | None
    number: str | None
    invoiced_at: date | None
    due_at: date | None
    footer_text: str | None
    items: list[InvoiceItemResponse]
    subtotal_cents: int
    tax_cents: int
    total_cents: int
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}


class InvoiceTotalsResponse(BaseModel):
    """Integer totals plus their display strings."""

    subtotal_cents: int
    tax_cents: int
    total_cents: int
    subtotal: str
    tax: str
    total: str
