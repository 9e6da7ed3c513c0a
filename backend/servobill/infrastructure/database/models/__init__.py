from .customer import CustomerModel
from .invoice import InvoiceModel
from .product import ProductModel

__all__ = [
    "CustomerModel",
    "InvoiceModel",
    "ProductModel",
]
