"""Application service (use case) for Customer operations."""

import logging

from servobill.application.interfaces import CustomerRepository
from servobill.application.schemas import CustomerCreate, CustomerUpdate
from servobill.application.services.query_shaping import shape_listing
from servobill.domain.entities import Customer
from servobill.domain.exceptions import DomainValidationError, EntityNotFoundError

logger = logging.getLogger(__name__)


class CustomerService:
    """Orchestrates customer CRUD logic. Depends on the repository port (DI)."""

    def __init__(self, repository: CustomerRepository):
        self._repository = repository

    async def list_customers(
        self,
        search: str | None = None,
        skip: int = 0,
        limit: int = 100,
    ) -> list[Customer]:
        customers = await self._repository.list_by_query(skip=skip, limit=limit)
        return shape_listing(customers, search=search, order_by=("name",))

    async def get_customer(self, customer_id: str) -> Customer:
        customer = await self._repository.get_by_id(customer_id)
        if customer is None:
            logger.debug("Customer %s not found", customer_id)
            raise EntityNotFoundError("Customer", customer_id)
        return customer

    async def create_customer(self, data: CustomerCreate) -> Customer:
        """Create a customer; ``customer_number`` must not be taken yet."""
        taken = await self._repository.list_by_query(
            where={"customer_number": data.customer_number}, limit=1
        )
        if taken:
            raise DomainValidationError("is already in use", field="customer_number")
        customer = self._repository.create(**data.model_dump())
        await self._repository.save(customer)
        logger.info("Created customer %s (%s)", customer.id, customer.customer_number)
        return customer

    async def update_customer(self, customer_id: str, data: CustomerUpdate) -> Customer:
        customer = await self.get_customer(customer_id)
        customer.update(**data.model_dump(exclude_unset=True))
        await self._repository.save(customer)
        logger.info("Updated customer %s", customer.id)
        return customer

    async def delete_customer(self, customer_id: str) -> Customer:
        customer = await self.get_customer(customer_id)
        await self._repository.delete(customer_id)
        logger.info("Deleted customer %s", customer_id)
        return customer
