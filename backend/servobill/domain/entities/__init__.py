from .customer import Customer
from .invoice import Invoice, InvoiceItem
from .product import Product

__all__ = [
    "Customer",
    "Invoice",
    "InvoiceItem",
    "Product",
]
