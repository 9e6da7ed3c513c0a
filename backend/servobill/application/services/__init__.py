from .customer_service import CustomerService
from .invoice_service import InvoiceService
from .product_service import ProductService

__all__ = [
    "CustomerService",
    "InvoiceService",
    "ProductService",
]
