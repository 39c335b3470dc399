from decimal import Decimal

from lightbnb.mappers.price_mapper import to_minor_units


def test_whole_dollars():
    assert to_minor_units(100) == 10000


def test_decimal_dollars():
    assert to_minor_units(Decimal("100.00")) == 10000


def test_float_does_not_drift():
    assert to_minor_units(19.99) == 1999


def test_fractional_cents_round_half_up():
    assert to_minor_units("10.005") == 1001
