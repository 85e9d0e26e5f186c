from decimal import ROUND_FLOOR, Decimal, localcontext
from typing import Union

Number = Union[int, float, str, Decimal]

HBAR_DECIMALS = 8


def _to_decimal(value: Number) -> Decimal:
    # str() first so binary float noise (0.1 -> 0.1000000000000000055...) is dropped
    if isinstance(value, Decimal):
        return value
    return Decimal(str(value))


def to_base_unit(amount: Number, decimals: int) -> int:
    """Convert a display amount to the smallest integer unit.

    Example: ``to_base_unit(1.5, 8) == 150000000``. Scaling is exact and the
    result is rounded toward negative infinity.
    """
    with localcontext() as ctx:
        # uint256 token supplies need more than the default 28 digits
        ctx.prec = 80
        scaled = _to_decimal(amount).scaleb(int(decimals))
        return int(scaled.to_integral_value(rounding=ROUND_FLOOR))


def to_display_unit(base_amount: Number, decimals: int) -> Decimal:
    """Convert a smallest-unit amount back to a display amount."""
    return _to_decimal(base_amount).scaleb(-int(decimals))


def to_tinybars(amount: Number) -> int:
    return to_base_unit(amount, HBAR_DECIMALS)


def to_hbar(tinybars: Number) -> Decimal:
    return to_display_unit(tinybars, HBAR_DECIMALS)
