from decimal import ROUND_HALF_UP, Decimal

MINOR_UNITS_PER_MAJOR = 100


def to_minor_units(amount: Decimal | int | float | str) -> int:
    """Convert a price in major units (dollars) to stored minor units (cents)."""
    cents = Decimal(str(amount)) * MINOR_UNITS_PER_MAJOR
    return int(cents.quantize(Decimal("1"), rounding=ROUND_HALF_UP))
