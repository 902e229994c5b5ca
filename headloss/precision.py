"""
Rounding helpers used by every calculation in the package.

Results are reported with the same number of significant figures (or decimal
places) the engineering spreadsheet showed, so each helper rounds the exact
decimal value of the float with ties going away from zero and hands back a
plain float.
"""

import math
from decimal import Decimal, ROUND_HALF_UP, localcontext


def round_significant(value, digits):
    """
    Round to a number of significant figures.

    Args:
        value: Number to round
        digits: Significant figures to keep (>= 1)

    Returns:
        Rounded value as a float
    """
    value = float(value)
    if value == 0 or not math.isfinite(value):
        return value

    exact = Decimal(value)
    exponent = exact.adjusted() - digits + 1
    with localcontext() as ctx:
        ctx.prec = max(28, digits + 2)
        return float(exact.quantize(Decimal(1).scaleb(exponent), rounding=ROUND_HALF_UP))


def round_fixed(value, decimals):
    """Round to a fixed number of decimal places, returned as a float."""
    value = float(value)
    if not math.isfinite(value):
        return value

    exact = Decimal(value)
    # Every integer digit is kept, so precision must grow with the magnitude
    with localcontext() as ctx:
        ctx.prec = max(28, exact.adjusted() + decimals + 2)
        return float(exact.quantize(Decimal(1).scaleb(-decimals), rounding=ROUND_HALF_UP))
