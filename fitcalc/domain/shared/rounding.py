"""Presentation rounding helpers."""

import math
from decimal import ROUND_HALF_UP, Decimal, localcontext


def round_half_up(value: float, ndigits: int = 1) -> float:
    """Round to ``ndigits`` decimals with halves rounded away from zero.

    Built-in ``round`` rounds halves to even, which would report a
    Mifflin-St Jeor BMR of 1672.5 as 1672. Non-finite values are returned
    unchanged.

    Example:
        >>> round_half_up(116.65)
        116.7
    """
    if not math.isfinite(value):
        return value
    exact = Decimal(repr(value))
    quantum = Decimal(1).scaleb(-ndigits)
    with localcontext() as ctx:
        # Keep every integer digit of large magnitudes
        ctx.prec = max(ctx.prec, exact.adjusted() + ndigits + 2)
        return float(exact.quantize(quantum, rounding=ROUND_HALF_UP))


def round_energy(value: float) -> int:
    """Round an energy figure to the nearest whole unit.

    Example:
        >>> round_energy(1673.5)
        1674
    """
    return int(round_half_up(value, 0))
