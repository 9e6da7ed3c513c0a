"""Shared SQLAlchemy plumbing for the aggregate repositories."""

import logging
from abc import ABC, abstractmethod
from collections.abc import Mapping
from datetime import datetime, timezone
from typing import Any, ClassVar, Generic, TypeVar

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from servobill.domain.exceptions import DomainValidationError
from servobill.domain.lifecycle import IdGenerator, new_id
from servobill.infrastructure.database.base import Base

T = TypeVar("T")
M = TypeVar("M", bound=Base)

logger = logging.getLogger(__name__)


def as_utc(value: datetime) -> datetime:
    """Attach UTC to timestamps from backends that drop tzinfo (e.g. SQLite)."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


class SQLAlchemyRepository(ABC, Generic[T, M]):
    """Implements get/list/save/delete for one entity ↔ one ORM model.

    Subclasses provide ``model_class`` and the two mapping functions.
    """

    model_class: ClassVar[type]

    def __init__(self, session: AsyncSession, id_generator: IdGenerator = new_id):
        super().__init__(id_generator)
        self._session = session

    @abstractmethod
    def _to_entity(self, model: M) -> T:
        """Map ORM model → domain entity."""

    @abstractmethod
    def _to_values(self, entity: T) -> dict[str, Any]:
        """Map domain entity → column values (every column, id included)."""

    async def get_by_id(self, record_id: str) -> T | None:
        result = await self._session.get(self.model_class, record_id)
        return self._to_entity(result) if result else None

    async def list_by_query(
        self,
        where: Mapping[str, Any] | None = None,
        skip: int = 0,
        limit: int = 100,
    ) -> list[T]:
        stmt = select(self.model_class)
        columns = self.model_class.__table__.columns
        for key, value in (where or {}).items():
            if key not in columns:
                raise DomainValidationError(
                    f"cannot filter {self.model_class.__tablename__} by this field", field=key
                )
            stmt = stmt.where(columns[key] == value)

        stmt = stmt.order_by(
            self.model_class.created_at.desc(), self.model_class.id
        ).offset(skip).limit(limit)
        result = await self._session.execute(stmt)
        return [self._to_entity(row) for row in result.scalars().all()]

    async def save(self, record: T) -> T:
        record.validate()
        values = self._to_values(record)
        model = await self._session.get(self.model_class, values["id"])
        if model is None:
            self._session.add(self.model_class(**values))
        else:
            for key, value in values.items():
                setattr(model, key, value)
        try:
            await self._session.flush()
        except IntegrityError as e:
            logger.debug("Rejected %s %s: %s", self.model_class.__tablename__, values["id"], e.orig)
            raise DomainValidationError("conflicts with a stored record") from e
        return record

    async def delete(self, record_id: str) -> bool:
        model = await self._session.get(self.model_class, record_id)
        if model is None:
            return False
        await self._session.delete(model)
        await self._session.flush()
        return True
