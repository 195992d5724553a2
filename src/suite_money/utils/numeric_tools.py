from __future__ import annotations

from decimal import MAX_EMAX, MAX_PREC, MIN_EMIN, Context, Decimal
from typing import TypeAlias

# Use where optimal type is `Decimal`, but other types are also acceptable (and will be converted to `Decimal`)
DecimalLike: TypeAlias = Decimal | int | str | float

# Signed 64-bit bounds used when narrowing amounts to integer minor units
INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1

# Number of decimal digits in INT64_MAX
INT64_DIGITS = 19

# Significant digits kept by monetary division, the only operation whose exact result may not terminate
DIVISION_PRECISION = 50

# Private contexts for monetary arithmetic. The caller's (global or local) decimal context is never used
# or touched, so a result never depends on how the application configured `decimal`.
# Addition, subtraction, multiplication, remainder and quantizing are exact under EXACT_CONTEXT.
EXACT_CONTEXT = Context(prec=MAX_PREC, Emax=MAX_EMAX, Emin=MIN_EMIN)
DIVISION_CONTEXT = Context(prec=DIVISION_PRECISION, Emax=MAX_EMAX, Emin=MIN_EMIN)


def as_decimal(value: DecimalLike) -> Decimal:
    """Converts input to `Decimal` safely.

    Ensures floats are converted via string to avoid precision noise.

    Args:
        value: Input value as `DecimalLike`.

    Returns:
        Value converted to `Decimal`.
    """
    if isinstance(value, Decimal):
        return value

    return Decimal(str(value))


def fits_int64(value: int) -> bool:
    """Check whether $value can be stored in a signed 64-bit integer."""
    return INT64_MIN <= value <= INT64_MAX
