"""Concrete repository implementation for Customer backed by SQLAlchemy."""

from dataclasses import asdict
from typing import Any

from servobill.application.interfaces import CustomerRepository
from servobill.domain.entities import Customer
from servobill.infrastructure.database.models import CustomerModel
from servobill.infrastructure.database.repositories.base import SQLAlchemyRepository, as_utc


class SQLAlchemyCustomerRepository(SQLAlchemyRepository[Customer, CustomerModel], CustomerRepository):
    """Implements the CustomerRepository port using SQLAlchemy async sessions."""

    model_class = CustomerModel

    def _to_entity(self, model: CustomerModel) -> Customer:
        return Customer(
            id=model.id,
            name=model.name,
            customer_number=model.customer_number,
            contact_name=model.contact_name,
            show_contact=model.show_contact,
            email=model.email,
            street=model.street,
            zip=model.zip,
            city=model.city,
            state=model.state,
            country=model.country,
            notes=model.notes,
            created_at=as_utc(model.created_at),
            updated_at=as_utc(model.updated_at),
        )

    def _to_values(self, entity: Customer) -> dict[str, Any]:
        # Customer fields and columns share names one to one
        return asdict(entity)
