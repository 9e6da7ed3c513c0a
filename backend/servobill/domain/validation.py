"""Field checks shared by the entity ``validate()`` methods."""

import math
from numbers import Real
from typing import Any

from servobill.domain.exceptions import DomainValidationError


def require_str(value: Any, field: str) -> None:
    if not isinstance(value, str):
        raise DomainValidationError("must be a string", field=field)


def require_text(value: Any, field: str) -> None:
    if not isinstance(value, str) or not value.strip():
        raise DomainValidationError("must be a non-empty string", field=field)


def require_bool(value: Any, field: str) -> None:
    if not isinstance(value, bool):
        raise DomainValidationError("must be true or false", field=field)


def require_cents(value: Any, field: str, *, allow_negative: bool = False) -> None:
    if isinstance(value, bool) or not isinstance(value, int):
        raise DomainValidationError("must be an integer amount of cents", field=field)
    if not allow_negative and value < 0:
        raise DomainValidationError("must not be negative", field=field)


def require_number(value: Any, field: str, *, minimum: float = 0, maximum: float | None = None) -> None:
    if isinstance(value, bool) or not isinstance(value, Real):
        raise DomainValidationError("must be a number", field=field)
    if not math.isfinite(value):
        raise DomainValidationError("must be a finite number", field=field)
    if value < minimum:
        raise DomainValidationError(f"must be at least {minimum}", field=field)
    if maximum is not None and value > maximum:
        raise DomainValidationError(f"must be at most {maximum}", field=field)


def require_percentage(value: Any, field: str = "tax_percentage") -> None:
    require_number(value, field, minimum=0, maximum=100)
