"""Numeric values typed in by the operator, and how money is displayed.

Amounts are always Decimal to avoid floating-point rounding errors that
would show up in displayed totals.  Accepted ranges are those of a signed
32-bit integer (quantities, choices) and of a 96-bit decimal (amounts), so
anything outside them is rejected at input instead of failing later.
"""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal, InvalidOperation, localcontext

from bizstore.domain.exceptions import ParseFailure

INT_MIN = -(2**31)
INT_MAX = 2**31 - 1
AMOUNT_MAX = Decimal("79228162514264337593543950335")

_CENTS = Decimal("0.01")


def int_in_range(value: int) -> bool:
    return INT_MIN <= value <= INT_MAX


def amount_in_range(value: Decimal) -> bool:
    return value.is_finite() and value.copy_abs() <= AMOUNT_MAX


def parse_decimal(raw: str) -> Decimal:
    """Read a decimal amount such as ``9.99`` or ``1,000.50``.

    Exponent notation is not accepted.
    """
    text = raw.strip().replace(",", "")
    if "e" in text.lower():
        raise ParseFailure(f"Invalid number: {raw!r}")
    try:
        value = Decimal(text)
    except (InvalidOperation, ValueError) as exc:
        raise ParseFailure(f"Invalid number: {raw!r}") from exc
    if not amount_in_range(value):
        raise ParseFailure(f"Invalid number: {raw!r}")
    return value


def parse_int(raw: str) -> int:
    try:
        value = int(raw.strip())
    except ValueError as exc:
        raise ParseFailure(f"Invalid whole number: {raw!r}") from exc
    if not int_in_range(value):
        raise ParseFailure(f"Invalid whole number: {raw!r}")
    return value


def _to_cents(amount: Decimal) -> Decimal:
    # Enough precision for every integer digit plus the two decimals.
    with localcontext() as ctx:
        ctx.prec = max(ctx.prec, amount.adjusted() + 3)
        return amount.quantize(_CENTS, rounding=ROUND_HALF_UP)


def format_fixed(amount: Decimal) -> str:
    """Two fractional digits, halves rounded away from zero."""
    return str(_to_cents(amount))


def format_currency(amount: Decimal, symbol: str = "$") -> str:
    rounded = _to_cents(amount)
    if rounded < 0:
        return f"-{symbol}{rounded.copy_abs():,.2f}"
    return f"{symbol}{rounded:,.2f}"
