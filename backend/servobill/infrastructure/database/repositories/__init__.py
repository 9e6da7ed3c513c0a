from .customer_repository import SQLAlchemyCustomerRepository
from .invoice_repository import SQLAlchemyInvoiceRepository
from .product_repository import SQLAlchemyProductRepository

__all__ = [
    "SQLAlchemyCustomerRepository",
    "SQLAlchemyInvoiceRepository",
    "SQLAlchemyProductRepository",
]
