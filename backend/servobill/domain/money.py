"""Monetary computation for invoice line items.

All amounts are integer cents. Each line is rounded to a whole cent
(half-up) before it is added to a sum, so the sum of the displayed line
amounts always equals the displayed total.
"""

from collections.abc import Iterable
from decimal import ROUND_HALF_UP, Decimal
from typing import Protocol

_ONE_CENT = Decimal("1")
_HUNDRED = Decimal("100")


class LineItem(Protocol):
    """Minimal shape the engine needs from an invoice line."""

    price_cents: int
    quantity: float
    tax_percentage: float


def _to_decimal(value: int | float | Decimal) -> Decimal:
    if isinstance(value, Decimal):
        return value
    # str() keeps 0.1 as 0.1 instead of its binary expansion
    return Decimal(str(value))


def _round_cents(amount: Decimal) -> int:
    return int(amount.quantize(_ONE_CENT, rounding=ROUND_HALF_UP))


def line_subtotal(item: LineItem) -> int:
    """Net amount of one line: ``price_cents * quantity``, rounded."""
    return _round_cents(_to_decimal(item.price_cents) * _to_decimal(item.quantity))


def line_tax(item: LineItem) -> int:
    """Tax of one line: ``price_cents * quantity * tax_percentage / 100``, rounded."""
    amount = (
        _to_decimal(item.price_cents)
        * _to_decimal(item.quantity)
        * _to_decimal(item.tax_percentage)
        / _HUNDRED
    )
    return _round_cents(amount)


def subtotal(items: Iterable[LineItem]) -> int:
    return sum((line_subtotal(item) for item in items), 0)


def tax_total(items: Iterable[LineItem]) -> int:
    return sum((line_tax(item) for item in items), 0)


def total(items: Iterable[LineItem]) -> int:
    items = list(items)
    return subtotal(items) + tax_total(items)


def cents_to_price(cents: int) -> str:
    """Render cents as a decimal string with exactly two fractional digits.

    Display only; never parse the result back into an amount.
    """
    sign = "-" if cents < 0 else ""
    whole, fraction = divmod(abs(int(cents)), 100)
    return f"{sign}{whole}.{fraction:02d}"


def format_price(cents: int, currency_symbol: str = "€") -> str:
    """Render cents for display, e.g. ``2190`` -> ``"21.90 €"``."""
    return f"{cents_to_price(cents)} {currency_symbol}"
