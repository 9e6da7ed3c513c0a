"""Identity and timestamp lifecycle shared by every domain record.

Entities do not inherit from a common base. Each one is a plain dataclass
that satisfies the ``Timestamped`` protocol and calls the two free functions
below from ``__post_init__`` and ``update``.
"""

import dataclasses
from collections.abc import Callable, Iterable, Mapping
from datetime import datetime, timezone
from typing import Any, Protocol, runtime_checkable
from uuid import uuid4

from servobill.domain.exceptions import DomainValidationError, ImmutableFieldError

IdGenerator = Callable[[], str]
Clock = Callable[[], datetime]

LIFECYCLE_FIELDS = frozenset({"id", "created_at", "updated_at"})


@runtime_checkable
class Timestamped(Protocol):
    """Anything with a stable id and creation/modification timestamps."""

    id: str
    created_at: datetime
    updated_at: datetime


def new_id() -> str:
    """Return a random 128-bit identifier as a UUID string."""
    return str(uuid4())


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def apply_lifecycle_defaults(
    record: Any,
    *,
    id_generator: IdGenerator = new_id,
    clock: Clock = utc_now,
) -> None:
    """Fill ``id``, ``created_at`` and ``updated_at`` when they are missing.

    Values already present (a record rehydrated from storage) are kept.
    A brand new record gets both timestamps from a single clock reading.
    """
    if not record.id:
        record.id = id_generator()
    if record.created_at is None:
        record.created_at = record.updated_at or clock()
    if record.updated_at is None:
        record.updated_at = record.created_at


def apply_partial_update(
    record: Any,
    changes: Mapping[str, Any],
    *,
    immutable: Iterable[str] = (),
    clock: Clock = utc_now,
) -> None:
    """Merge ``changes`` into ``record`` and refresh ``updated_at``.

    Only the supplied keys are written; omitted fields keep their value.
    The merged result is validated on a copy first, so a rejected update
    leaves ``record`` exactly as it was.

    Raises:
        ImmutableFieldError: a key names a lifecycle field or one of ``immutable``.
        DomainValidationError: a key is not a field of the record, or the
            merged copy fails the checks its constructor runs.
    """
    entity_type = type(record).__name__
    frozen = LIFECYCLE_FIELDS | frozenset(immutable)
    known = {f.name for f in dataclasses.fields(record)}

    for key in changes:
        if key in frozen:
            raise ImmutableFieldError(entity_type, key)
        if key not in known:
            raise DomainValidationError(f"unknown field for {entity_type}", field=key)

    candidate = dataclasses.replace(record, **changes)

    for key in changes:
        setattr(record, key, getattr(candidate, key))
    now = clock()
    record.updated_at = max(now, record.created_at)
