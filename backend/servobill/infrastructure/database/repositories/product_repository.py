"""Concrete repository implementation for Product backed by SQLAlchemy."""

from typing import Any

from servobill.application.interfaces import ProductRepository
from servobill.domain.entities import Product
from servobill.infrastructure.database.models import ProductModel
from servobill.infrastructure.database.repositories.base import SQLAlchemyRepository, as_utc


class SQLAlchemyProductRepository(SQLAlchemyRepository[Product, ProductModel], ProductRepository):
    """Implements the ProductRepository port using SQLAlchemy async sessions."""

    model_class = ProductModel

    def _to_entity(self, model: ProductModel) -> Product:
        return Product(
            id=model.id,
            category=model.category,
            name=model.name,
            description=model.description,
            notes=model.notes,
            unit=model.unit,
            price_cents=model.price_cents,
            tax_percentage=model.tax_percentage,
            created_at=as_utc(model.created_at),
            updated_at=as_utc(model.updated_at),
        )

    def _to_values(self, entity: Product) -> dict[str, Any]:
        return {
            "id": entity.id,
            "category": entity.category,
            "name": entity.name,
            "description": entity.description,
            "notes": entity.notes,
            "unit": entity.unit,
            "price_cents": entity.price_cents,
            "tax_percentage": entity.tax_percentage,
            "created_at": entity.created_at,
            "updated_at": entity.updated_at,
        }
