"""In-memory fakes of the repository ports, shared by unit and API tests."""

import copy
import itertools
from collections.abc import Mapping
from datetime import datetime, timedelta, timezone
from typing import Any

from servobill.application.interfaces import (
    CustomerRepository,
    InvoiceRepository,
    ProductRepository,
)


def sequential_ids(prefix: str = "id"):
    """Deterministic id generator: ``id-1``, ``id-2``, ..."""
    counter = itertools.count(1)
    return lambda: f"{prefix}-{next(counter)}"


class FakeClock:
    """Clock that only moves when told to."""

    def __init__(self, start: datetime | None = None):
        self.now = start or datetime(2026, 1, 1, 12, 0, tzinfo=timezone.utc)

    def __call__(self) -> datetime:
        return self.now

    def advance(self, seconds: float = 1) -> datetime:
        self.now += timedelta(seconds=seconds)
        return self.now


class InMemoryRepository:
    """Stores deep copies, so only ``save`` changes what a later read sees."""

    def __init__(self, id_generator=None):
        super().__init__(id_generator or sequential_ids())
        self.records: dict[str, Any] = {}
        self.save_calls = 0
        self.delete_calls = 0
        self.last_query: dict[str, Any] | None = None

    async def get_by_id(self, record_id: str):
        record = self.records.get(record_id)
        return copy.deepcopy(record) if record is not None else None

    async def list_by_query(
        self,
        where: Mapping[str, Any] | None = None,
        skip: int = 0,
        limit: int = 100,
    ) -> list:
        self.last_query = {"where": dict(where or {}), "skip": skip, "limit": limit}
        matches = [
            r for r in self.records.values()
            if all(getattr(r, k) == v for k, v in (where or {}).items())
        ]
        return copy.deepcopy(matches[skip : skip + limit])

    async def save(self, record):
        self.save_calls += 1
        record.validate()
        self.records[record.id] = copy.deepcopy(record)
        return record

    async def delete(self, record_id: str) -> bool:
        self.delete_calls += 1
        return self.records.pop(record_id, None) is not None


class FakeProductRepository(InMemoryRepository, ProductRepository):
    pass


class FakeCustomerRepository(InMemoryRepository, CustomerRepository):
    pass


class FakeInvoiceRepository(InMemoryRepository, InvoiceRepository):
    pass
