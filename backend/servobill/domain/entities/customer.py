"""Domain entity — a customer invoices are addressed to."""

from dataclasses import dataclass
from datetime import datetime
from typing import Any

from servobill.domain.lifecycle import apply_lifecycle_defaults, apply_partial_update
from servobill.domain.validation import require_bool, require_str, require_text


@dataclass
class Customer:
    """Core domain entity for a billed party.

    ``customer_number`` is handed out by the caller (usually a numbering
    scheme in the surrounding system) and is fixed once the customer exists.
    ``validate()``, run before every save, requires it and ``name`` to be set.
    """

    IMMUTABLE_FIELDS = frozenset({"customer_number"})

    name: str = ""
    customer_number: str = ""
    contact_name: str | None = None
    show_contact: bool = False
    email: str | None = None
    street: str | None = None
    zip: str | None = None
    city: str | None = None
    state: str | None = None
    country: str | None = None
    notes: str | None = None
    id: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None

    def __post_init__(self) -> None:
        apply_lifecycle_defaults(self)
        self._check_fields()

    def _check_fields(self) -> None:
        require_str(self.name, "name")
        require_str(self.customer_number, "customer_number")
        require_bool(self.show_contact, "show_contact")

    def validate(self) -> None:
        self._check_fields()
        require_text(self.name, "name")
        require_text(self.customer_number, "customer_number")

    def update(self, **changes: Any) -> None:
        """Merge the given fields; ``customer_number`` is rejected."""
        apply_partial_update(self, changes, immutable=self.IMMUTABLE_FIELDS)
