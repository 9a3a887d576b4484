import pytest

from marketbooks.numeric import Decimal


def test_default_is_zero():
    assert Decimal() == Decimal(0)
    assert float(Decimal()) == 0.0


def test_arithmetic_round_trip():
    a = Decimal(12.5)
    b = Decimal(7.25)
    assert (a + b) - b == a
    assert (a * b) / b == a


def test_tolerant_equality():
    assert Decimal(0.1) + Decimal(0.2) == Decimal(0.3)
    assert not (Decimal(0.1) + Decimal(0.2) != Decimal(0.3))


def test_ordering_respects_tolerance():
    x = Decimal(1.0)
    y = Decimal(1.0 + 1e-12)
    assert not x < y
    assert not y > x
    assert x <= y and x >= y
    assert Decimal(1) < Decimal(2)
    assert Decimal(2) > Decimal(1)
    assert not Decimal(2) <= Decimal(1)
    assert not Decimal(1) >= Decimal(2)


def test_negation():
    assert -Decimal(5) + Decimal(5) == Decimal(0)
    assert -(-Decimal(3.5)) == Decimal(3.5)


def test_mixed_with_plain_numbers():
    assert Decimal(2) + 3 == Decimal(5)
    assert 10 - Decimal(4) == Decimal(6)
    assert Decimal(0) < 1
    assert 0 < Decimal(1)


def test_division_by_zero_raises():
    with pytest.raises(ZeroDivisionError):
        Decimal(1) / Decimal(0)


def test_parse_from_string():
    assert Decimal("12.5") == Decimal(12.5)
    assert Decimal("  -3") == Decimal(-3)
    assert Decimal("2e3") == Decimal(2000)


def test_parse_ignores_trailing_text():
    assert Decimal("42abc") == Decimal(42)


@pytest.mark.parametrize("text", ["", "abc", "-", "  x1"])
def test_parse_invalid_raises(text):
    with pytest.raises(ValueError):
        Decimal(text)


def test_invalid_type_raises():
    with pytest.raises(TypeError):
        Decimal([1])


def test_str_formatting():
    assert str(Decimal(1000)) == "1000"
    assert str(Decimal(-500)) == "-500"
    assert str(Decimal(1) / Decimal(3)) == "0.333333"


def test_copy_and_float():
    original = Decimal(9.75)
    assert Decimal(original) == original
    assert float(Decimal(original)) == 9.75


def test_repr_round_trip():
    value = Decimal(3.25)
    assert repr(value) == "Decimal(3.25)"