"""Currency helpers. Amounts are stored as integer cents and exposed as
two-decimal ``Decimal`` values rounded half-up."""

from decimal import ROUND_HALF_UP, Decimal

CENT = Decimal("0.01")


def to_amount(value) -> Decimal:
    """Quantize a number to two decimals, rounding half-up."""
    if not isinstance(value, Decimal):
        value = Decimal(str(value))
    return value.quantize(CENT, rounding=ROUND_HALF_UP)


def to_cents(value) -> int:
    return int(to_amount(value) * 100)


def from_cents(cents: int) -> Decimal:
    return (Decimal(cents) / 100).quantize(CENT)


def format_amount(value) -> str:
    """Render an amount the way it appears in user-facing messages, e.g. ``6000.00``."""
    return f"{to_amount(value):.2f}"
