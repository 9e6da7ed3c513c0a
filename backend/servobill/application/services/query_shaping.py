"""Post-processing of repository listings: name search and deterministic ordering.

Pagination is not applied here; skip/limit go to the repository unchanged.
"""

import unicodedata
from collections.abc import Iterable, Sequence
from typing import TypeVar

T = TypeVar("T")


def collation_key(value: str | None) -> tuple[str, str]:
    """Sort key approximating a locale-aware comparison.

    Accents and case are ignored first (``"é" ~ "e"``, ``"a" ~ "A"``) and the
    raw text breaks ties, so the order does not depend on the process locale.
    """
    text = value or ""
    decomposed = unicodedata.normalize("NFKD", text)
    base = "".join(ch for ch in decomposed if not unicodedata.combining(ch))
    return base.casefold(), text


def filter_by_search(records: Iterable[T], search: str | None, field: str = "name") -> list[T]:
    """Keep records whose ``field`` contains ``search``, ignoring case.

    An empty or missing search term keeps everything.
    """
    if not search:
        return list(records)
    needle = search.casefold()
    return [r for r in records if needle in (getattr(r, field) or "").casefold()]


def sort_records(records: Iterable[T], fields: Sequence[str]) -> list[T]:
    """Stable sort by ``fields`` in precedence order."""
    return sorted(records, key=lambda r: tuple(collation_key(getattr(r, f)) for f in fields))


def shape_listing(
    records: Iterable[T],
    *,
    search: str | None = None,
    order_by: Sequence[str] = ("name",),
) -> list[T]:
    return sort_records(filter_by_search(records, search), order_by)
