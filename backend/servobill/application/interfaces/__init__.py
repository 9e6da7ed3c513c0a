from .repository import Repository
from .customer_repository import CustomerRepository
from .invoice_repository import InvoiceRepository
from .product_repository import ProductRepository

__all__ = [
    "Repository",
    "CustomerRepository",
    "InvoiceRepository",
    "ProductRepository",
]
