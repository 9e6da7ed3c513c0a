"""Pydantic DTOs (Data Transfer Objects) for the Product feature."""

from datetime import datetime

from pydantic import BaseModel, Field


class ProductInput(BaseModel):
    """Schema for creating a new product."""

    category: str = Field(..., min_length=1, max_length=255, examples=["Consulting"])
    name: str = Field(..., min_length=1, max_length=255, examples=["Workshop day"])
    description: str | None = None
    notes: str | None = None
    unit: str | None = Field(None, max_length=50, examples=["day"])
    price_cents: int = Field(0, ge=0, examples=[95000])
    tax_percentage: float = Field(0, ge=0, le=100, allow_inf_nan=False, examples=[19])


class ProductUpdate(BaseModel):
    """Schema for updating a product — only the fields sent are changed."""

    category: str | None = Field(None, min_length=1, max_length=255)
    name: str | None = Field(None, min_length=1, max_length=255)
    description: str | None = None
    notes: str | None = None
    unit: str | None = Field(None, max_length=50)
    price_cents: int | None = Field(None, ge=0)
    tax_percentage: float | None = Field(None, ge=0, le=100, allow_inf_nan=False)

    model_config = {"extra": "forbid"}


class ProductWhereInput(BaseModel):
    """Listing filter: exact category and/or a name search term."""

    category: str | None = None
    search: str | None = None


class ProductResponse(BaseModel):
    """Schema returned to the client."""

    id: str
    category: str
    name: str
    description: str | None
    notes: str | None
    unit: str | None
    price_cents: int
    tax_percentage: float
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}
