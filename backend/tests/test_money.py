from decimal import Decimal

from app.utils.money import is_valid_price, is_valid_rate, round2, to_decimal


def test_round2_halves_away_from_zero():
    assert round2(Decimal("2.675")) == Decimal("2.68")
    assert round2(Decimal("-2.675")) == Decimal("-2.68")
    assert round2(Decimal("0.005")) == Decimal("0.01")
    assert round2(Decimal("6.186675")) == Decimal("6.19")


def test_round2_keeps_two_places():
    assert str(round2(Decimal("10"))) == "10.00"
    assert str(round2(Decimal("0"))) == "0.00"


def test_to_decimal_goes_through_str_for_floats():
    assert to_decimal(49.99) == Decimal("49.99")
    assert to_decimal("25.00") == Decimal("25.00")
    assert to_decimal(3) == Decimal("3")


def test_to_decimal_rejects_non_numbers():
    assert to_decimal(None) is None
    assert to_decimal(True) is None
    assert to_decimal("abc") is None
    assert to_decimal(object()) is None


def test_is_valid_price():
    assert is_valid_price(Decimal("0"))
    assert is_valid_price(Decimal("12.50"))
    assert not is_valid_price(None)
    assert not is_valid_price(Decimal("-0.01"))
    assert not is_valid_price(Decimal("NaN"))
    assert not is_valid_price(Decimal("Infinity"))


def test_is_valid_rate():
    assert is_valid_rate(Decimal("0"))
    assert is_valid_rate(Decimal("0.0825"))
    assert not is_valid_rate(Decimal("1"))
    assert not is_valid_rate(Decimal("-0.01"))
    assert not is_valid_rate(Decimal("NaN"))
    assert not is_valid_rate(None)
