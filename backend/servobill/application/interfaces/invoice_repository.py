"""Abstract repository interface (port) for Invoice persistence."""

from servobill.application.interfaces.repository import Repository
from servobill.domain.entities import Invoice


class InvoiceRepository(Repository[Invoice]):
    """Port for invoice persistence — implemented in the infrastructure layer."""

    entity_class = Invoice
