# phpayroll/utils.py

from datetime import timedelta
from decimal import Decimal, InvalidOperation, ROUND_HALF_UP

CENTAVO = Decimal('0.01')
ZERO = Decimal('0')


def to_decimal(value):
    """Coerces a number to Decimal. None, NaN and unparseable input become 0."""
    if isinstance(value, Decimal):
        result = value
    elif value is None or isinstance(value, bool):
        return ZERO
    else:
        try:
            result = Decimal(str(value))
        except (InvalidOperation, ValueError, TypeError):
            return ZERO
    if result.is_nan() or result.is_infinite():
        return ZERO
    return result


def non_negative(value):
    """Like to_decimal(), with negative amounts clamped to 0."""
    result = to_decimal(value)
    return result if result > 0 else ZERO


def money(value):
    return to_decimal(value).quantize(CENTAVO, rounding=ROUND_HALF_UP)


def date_range(start, end):
    """Yields every date from start to end, inclusive."""
    current = start
    while current <= end:
        yield current
        current += timedelta(days=1)
