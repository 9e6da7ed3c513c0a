"""Abstract repository interface (port) for Customer persistence."""

from servobill.application.interfaces.repository import Repository
from servobill.domain.entities import Customer


class CustomerRepository(Repository[Customer]):
    """Port for customer persistence — implemented in the infrastructure layer."""

    entity_class = Customer
