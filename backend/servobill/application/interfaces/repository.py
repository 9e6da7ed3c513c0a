"""Generic repository port shared by every aggregate."""

from abc import ABC, abstractmethod
from collections.abc import Mapping
from typing import Any, ClassVar, Generic, TypeVar

from servobill.domain.lifecycle import IdGenerator, new_id

T = TypeVar("T")


class Repository(ABC, Generic[T]):
    """Port for record persistence — implemented in the infrastructure layer.

    ``create`` only builds the record; nothing reaches storage until ``save``.
    """

    entity_class: ClassVar[type]

    def __init__(self, id_generator: IdGenerator = new_id):
        self._id_generator = id_generator

    def create(self, **fields: Any) -> T:
        """Build a new, unsaved record with a freshly generated id.

        With no fields the record is blank; ``save`` refuses it until the
        required fields are filled in.
        """
        return self.entity_class(**fields, id=self._id_generator())

    @abstractmethod
    async def get_by_id(self, record_id: str) -> T | None:
        """Retrieve a single record, or None when it does not exist."""
        ...

    @abstractmethod
    async def list_by_query(
        self,
        where: Mapping[str, Any] | None = None,
        skip: int = 0,
        limit: int = 100,
    ) -> list[T]:
        """Retrieve records whose fields equal every value in ``where``, paginated."""
        ...

    @abstractmethod
    async def save(self, record: T) -> T:
        """Insert or overwrite the stored state of ``record``.

        Raises:
            DomainValidationError: ``record.validate()`` failed or the write
                conflicts with a stored record. Nothing is written.
        """
        ...

    @abstractmethod
    async def delete(self, record_id: str) -> bool:
        """Delete a record. Returns True if deleted, False if not found."""
        ...
