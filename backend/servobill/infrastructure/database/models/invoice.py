"""SQLAlchemy ORM model for the Invoice aggregate.

Line items are embedded as an ordered JSON array; they have no table of
their own.
"""

from datetime import date

from sqlalchemy import JSON, Date, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from servobill.infrastructure.database.base import Base
from servobill.infrastructure.database.models._columns import LifecycleColumns


class InvoiceModel(LifecycleColumns, Base):
    """ORM model — maps to the 'invoices' table."""

    __tablename__ = "invoices"

    customer_id: Mapped[str | None] = mapped_column(String(36), nullable=True, index=True)
    number: Mapped[str | None] = mapped_column(String(50), nullable=True)
    invoiced_at: Mapped[date | None] = mapped_column(Date, nullable=True)
    due_at: Mapped[date | None] = mapped_column(Date, nullable=True)
    footer_text: Mapped[str | None] = mapped_column(Text, nullable=True)
    items: Mapped[list] = mapped_column(JSON, nullable=False, default=list)

    def __repr__(self) -> str:
        return f"<InvoiceModel(id={self.id}, number='{self.number}')>"
