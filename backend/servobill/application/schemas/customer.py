"""Pydantic DTOs (Data Transfer Objects) for the Customer feature."""

from datetime import datetime

from pydantic import BaseModel, Field


class CustomerCreate(BaseModel):
    """Schema for creating a new customer."""

    name: str = Field(..., min_length=1, max_length=255, examples=["ACME GmbH"])
    customer_number: str = Field(..., min_length=1, max_length=50, examples=["C-1001"])
    contact_name: str | None = Field(None, max_length=255)
    show_contact: bool = False
    email: str | None = Field(None, max_length=255)
    street: str | None = Field(None, max_length=255)
    zip: str | None = Field(None, max_length=20)
    city: str | None = Field(None, max_length=255)
    state: str | None = Field(None, max_length=255)
    country: str | None = Field(None, max_length=255)
    notes: str | None = None


class CustomerUpdate(BaseModel):
    """Schema for updating a customer — ``customer_number`` is not accepted."""

    name: str | None = Field(None, min_length=1, max_length=255)
    contact_name: str | None = Field(None, max_length=255)
    show_contact: bool | None = None
    email: str | None = Field(None, max_length=255)
    street: str | None = Field(None, max_length=255)
    zip: str | None = Field(None, max_length=20)
    city: str | None = Field(None, max_length=255)
    state: str | None = Field(None, max_length=255)
    country: str | None = Field(None, max_length=255)
    notes: str | None = None

    model_config = {"extra": "forbid"}


class CustomerResponse(BaseModel):
    """Schema returned to the client."""

    id: str
    name: str
    customer_number: str
    contact_name: str | None
    show_contact: bool
    email: str | None
    street: str | None
    zip: str | None
    city: str | None
    state: str | None
    country: str | None
    notes: str | None
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}
