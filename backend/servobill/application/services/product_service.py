"""Application service (use case) for Product operations."""

import logging

from servobill.application.interfaces import ProductRepository
from servobill.application.schemas import ProductInput, ProductUpdate, ProductWhereInput
from servobill.application.services.query_shaping import shape_listing
from servobill.domain.entities import Product
from servobill.domain.exceptions import EntityNotFoundError

logger = logging.getLogger(__name__)

PRODUCT_ORDER = ("category", "name")


class ProductService:
    """Orchestrates product catalogue logic. Depends on the repository port (DI)."""

    def __init__(self, repository: ProductRepository):
        self._repository = repository

    async def list_products(
        self,
        where: ProductWhereInput | None = None,
        skip: int = 0,
        limit: int = 100,
    ) -> list[Product]:
        """List products by category and name, optionally narrowed by a name search.

        The search runs on the page the repository returns, after skip/limit.
        """
        where = where or ProductWhereInput()
        query = {"category": where.category} if where.category else None
        products = await self._repository.list_by_query(where=query, skip=skip, limit=limit)
        return shape_listing(products, search=where.search, order_by=PRODUCT_ORDER)

    async def get_product(self, product_id: str) -> Product | None:
        return await self._repository.get_by_id(product_id)

    async def require_product(self, product_id: str) -> Product:
        product = await self._repository.get_by_id(product_id)
        if product is None:
            logger.debug("Product %s not found", product_id)
            raise EntityNotFoundError("Product", product_id)
        return product

    async def create_product(self, data: ProductInput) -> Product:
        product = self._repository.create(**data.model_dump())
        await self._repository.save(product)
        logger.info("Created product %s (%s)", product.id, product.name)
        return product

    async def update_product(self, product_id: str, data: ProductUpdate) -> Product:
        product = await self.require_product(product_id)
        product.update(**data.model_dump(exclude_unset=True))
        await self._repository.save(product)
        logger.info("Updated product %s", product.id)
        return product

    async def delete_product(self, product_id: str) -> Product:
        """Delete a product and return it as it was before deletion."""
        product = await self.require_product(product_id)
        await self._repository.delete(product_id)
        logger.info("Deleted product %s", product_id)
        return product
