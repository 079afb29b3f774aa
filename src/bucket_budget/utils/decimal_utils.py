"""Helpers for Decimal normalization."""

from decimal import ROUND_HALF_UP, Decimal, InvalidOperation

CURRENCY_QUANTUM = Decimal("0.01")


def coerce_decimal(value) -> Decimal:
    """Normalize numeric values to Decimal.

    Args:
        value: Raw numeric value from SQL, adapters or callers.

    Returns:
        Decimal: Normalized numeric value.
    """
    if value is None:
        return Decimal("0")
    if isinstance(value, Decimal):
        return value
    return Decimal(str(value))


def round_currency(value) -> Decimal:
    """Round a value to the smallest currency unit, half away from zero.

    Args:
        value: Raw numeric value.

    Returns:
        Decimal: Value quantized to cents.
    """
    return coerce_decimal(value).quantize(
        CURRENCY_QUANTUM,
        rounding=ROUND_HALF_UP,
    )


def parse_decimal(value) -> Decimal | None:
    """Return a finite Decimal for value, or None when it is not a number."""
    if value is None or isinstance(value, bool):
        return None
    try:
        number = coerce_decimal(value)
    except (InvalidOperation, TypeError, ValueError):
        return None
    if not number.is_finite():
        return None
    return number


__all__ = [
    "CURRENCY_QUANTUM",
    "coerce_decimal",
    "parse_decimal",
    "round_currency",
]
