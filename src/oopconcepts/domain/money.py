"""Money amount conversion."""

from decimal import Decimal

from oopconcepts.domain.errors import ValidationError


def to_decimal(amount: Decimal | int | float | str) -> Decimal:
    """Convert a numeric amount to a finite Decimal.

    Floats go through str() so 150.75 becomes Decimal("150.75") rather than
    its binary expansion. NaN and infinities are refused whatever the input
    type, Decimal included.

    Raises:
        ValidationError: If the value is not a finite number
    """
    if isinstance(amount, Decimal):
        value = amount
    else:
        if isinstance(amount, float):
            amount = str(amount)
        try:
            value = Decimal(amount)
        except (ArithmeticError, TypeError, ValueError) as e:
            raise ValidationError(f"Not a valid amount: {amount!r}") from e
    if not value.is_finite():
        raise ValidationError(f"Not a valid amount: {amount!r}")
    return value
