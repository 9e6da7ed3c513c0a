"""SQLAlchemy ORM model for the Product entity."""

from sqlalchemy import Float, Index, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from servobill.infrastructure.database.base import Base
from servobill.infrastructure.database.models._columns import LifecycleColumns


class ProductModel(LifecycleColumns, Base):
    """ORM model — maps to the 'products' table."""

    __tablename__ = "products"

    category: Mapped[str] = mapped_column(String(255), nullable=False)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    notes: Mapped[str | None] = mapped_column(Text, nullable=True)
    unit: Mapped[str | None] = mapped_column(String(50), nullable=True)
    price_cents: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    tax_percentage: Mapped[float] = mapped_column(Float, nullable=False, default=0)

    __table_args__ = (
        Index("ix_products_category_name", "category", "name"),
    )

    def __repr__(self) -> str:
        return f"<ProductModel(id={self.id}, category='{self.category}', name='{self.name}')>"
