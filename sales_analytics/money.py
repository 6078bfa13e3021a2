from decimal import Decimal, ROUND_HALF_UP

_CENT = Decimal("0.01")


def as_decimal(value) -> Decimal:
    """Coerce a strategy result or input amount to Decimal without float noise."""
    if isinstance(value, Decimal):
        return value
    if isinstance(value, float):
        return Decimal(str(value))
    return Decimal(value)


def to_cents(value) -> Decimal:
    """Round to the nearest cent, halves away from zero."""
    return as_decimal(value).quantize(_CENT, rounding=ROUND_HALF_UP)
