"""Validation of currency inputs."""

from decimal import Decimal, InvalidOperation

from bucket_budget.domain.errors import BudgetError
from bucket_budget.utils.decimal_utils import parse_decimal, round_currency


def require_amount(
    value,
    *,
    error: type[BudgetError],
    label: str,
    allow_zero: bool = True,
    **details,
) -> Decimal:
    """Return value rounded to cents or raise the given error.

    Args:
        value: Raw amount supplied by the caller.
        error: BudgetError subclass raised on invalid input.
        label: Name of the field, used in the error message.
        allow_zero: Whether zero is accepted.
        **details: Extra context attached to the error.

    Returns:
        Decimal: Amount rounded half away from zero to cents.

    Raises:
        BudgetError: If the value is not a non-negative number that fits in
            cents, or is zero while ``allow_zero`` is False.
    """
    number = parse_decimal(value)
    if number is None:
        raise error(f"{label} must be a number, got {value!r}", **details)
    try:
        amount = round_currency(number)
    except InvalidOperation:
        raise error(
            f"{label} is too large to record in cents, got {value!r}",
            **details,
        ) from None
    if amount < 0 or (amount == 0 and not allow_zero):
        bound = ">= 0" if allow_zero else "> 0"
        raise error(f"{label} must be {bound}, got {number}", **details)
    return amount


__all__ = ["require_amount"]
