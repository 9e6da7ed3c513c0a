from .customer import CustomerCreate, CustomerUpdate, CustomerResponse
from .invoice import (
    InvoiceCreate,
    InvoiceUpdate,
    InvoiceResponse,
    InvoiceItemInput,
    InvoiceItemResponse,
    InvoiceTotalsResponse,
)
from .product import ProductInput, ProductUpdate, ProductWhereInput, ProductResponse

__all__ = [
    "CustomerCreate",
    "CustomerUpdate",
    "CustomerResponse",
    "InvoiceCreate",
    "InvoiceUpdate",
    "InvoiceResponse",
    "InvoiceItemInput",
    "InvoiceItemResponse",
    "InvoiceTotalsResponse",
    "ProductInput",
    "ProductUpdate",
    "ProductWhereInput",
    "ProductResponse",
]
