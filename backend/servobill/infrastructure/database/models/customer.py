"""SQLAlchemy ORM model for the Customer entity."""

from sqlalchemy import Boolean, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from servobill.infrastructure.database.base import Base
from servobill.infrastructure.database.models._columns import LifecycleColumns


class CustomerModel(LifecycleColumns, Base):
    """ORM model — maps to the 'customers' table."""

    __tablename__ = "customers"

    name: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    customer_number: Mapped[str] = mapped_column(String(50), nullable=False, unique=True)
    contact_name: Mapped[str | None] = mapped_column(String(255), nullable=True)
    show_contact: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    email: Mapped[str | None] = mapped_column(String(255), nullable=True)
    street: Mapped[str | None] = mapped_column(String(255), nullable=True)
    zip: Mapped[str | None] = mapped_column(String(20), nullable=True)
    city: Mapped[str | None] = mapped_column(String(255), nullable=True)
    state: Mapped[str | None] = mapped_column(String(255), nullable=True)
    country: Mapped[str | None] = mapped_column(String(255), nullable=True)
    notes: Mapped[str | None] = mapped_column(Text, nullable=True)

    def __repr__(self) -> str:
        return f"<CustomerModel(id={self.id}, number='{self.customer_number}')>"
