"""Abstract repository interface (port) for Product persistence."""

from servobill.application.interfaces.repository import Repository
from servobill.domain.entities import Product


class ProductRepository(Repository[Product]):
    """Port for product persistence — implemented in the infrastructure layer."""

    entity_class = Product
