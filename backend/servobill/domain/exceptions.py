"""Domain-specific exceptions — framework-independent."""


class EntityNotFoundError(Exception):
    """Raised when a requested entity does not exist."""

    def __init__(self, entity_type: str, entity_id: int | str):
        self.entity_type = entity_type
        self.entity_id = entity_id
        super().__init__(f"{entity_type} with id '{entity_id}' not found")


class DomainValidationError(Exception):
    """Raised when a record would end up with a malformed or out-of-range field."""

    def __init__(self, message: str, field: str | None = None):
        self.message = message
        self.field = field
        super().__init__(f"{field}: {message}" if field else message)


class ImmutableFieldError(DomainValidationError):
    """Raised when an update tries to touch a field fixed at creation time."""

    def __init__(self, entity_type: str, field: str):
        self.entity_type = entity_type
        super().__init__(f"{entity_type}.{field} cannot be changed after creation", field=field)


class UnauthorizedError(Exception):
    """Raised when the caller lacks the rights for an operation.

    Enforced by the presentation layer before a use case runs.
    """

    def __init__(self, message: str = "Not authorized"):
        self.message = message
        super().__init__(message)
