"""Domain entity — a sellable product or service with a net price and tax rate."""

from dataclasses import dataclass
from datetime import datetime
from typing import Any

from servobill.domain.lifecycle import apply_lifecycle_defaults, apply_partial_update
from servobill.domain.validation import (
    require_cents,
    require_percentage,
    require_str,
    require_text,
)


@dataclass
class Product:
    """A catalogue entry that invoice lines are usually copied from.

    ``price_cents`` is the net unit price in minor currency units. A blank
    product can be built and filled in later, but ``validate()`` (run by the
    repositories before every save) requires ``category`` and ``name``.
    """

    category: str = ""
    name: str = ""
    price_cents: int = 0
    tax_percentage: float = 0
    description: str | None = None
    notes: str | None = None
    unit: str | None = None
    id: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None

    def __post_init__(self) -> None:
        apply_lifecycle_defaults(self)
        self._check_fields()

    def _check_fields(self) -> None:
        require_str(self.category, "category")
        require_str(self.name, "name")
        require_cents(self.price_cents, "price_cents")
        require_percentage(self.tax_percentage)

    def validate(self) -> None:
        self._check_fields()
        require_text(self.category, "category")
        require_text(self.name, "name")

    def update(self, **changes: Any) -> None:
        """Merge the given fields and refresh the updated_at timestamp."""
        apply_partial_update(self, changes)
