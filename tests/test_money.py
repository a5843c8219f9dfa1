from decimal import Decimal

import pytest

from app.utils.money import amount_info, format_amount, from_minor_units, to_minor_units


@pytest.mark.parametrize(
    "amount, expected",
    [
        (12.345, 1235),
        (12.335, 1234),
        (12.346, 1235),
        (12.3456789, 1235),
        (1.005, 101),
        (2.995, 300),
        (0.1 + 0.2, 30),
        (0.01, 1),
        (99.99, 9999),
        (12345.67, 1234567),
        (0.0, 0),
        (-0.01, -1),
        (-99.99, -9999),
        (-123.45, -12345),
        (Decimal("19.995"), 2000),
        ("49.50", 4950),
        (7, 700),
    ],
)
def test_to_minor_units_rounds_half_up(amount, expected):
    result = to_minor_units(amount)
    assert result == expected
    assert isinstance(result, int)


def test_to_minor_units_rejects_non_finite():
    with pytest.raises(ValueError):
        to_minor_units(float("inf"))
    with pytest.raises(ValueError):
        to_minor_units(Decimal("NaN"))


@pytest.mark.parametrize(
    "minor, expected",
    [
        (1, Decimal("0.01")),
        (9999, Decimal("99.99")),
        (1234567, Decimal("12345.67")),
        (0, Decimal("0")),
        (-1, Decimal("-0.01")),
        (10000, Decimal("100")),
        (12301, Decimal("123.01")),
    ],
)
def test_from_minor_units_is_exact(minor, expected):
    assert from_minor_units(minor) == expected


def test_round_trip_over_minor_unit_domain():
    samples = [0, 1, -1, 99, 100, 101, 12345, -12345, 999999999999, -1234567890]
    samples += [to_minor_units(x) for x in (12.345, 12.335, 1.005, 0.1 + 0.2, -50.75)]

    for minor in samples:
        assert to_minor_units(from_minor_units(minor)) == minor


@pytest.mark.parametrize(
    "minor, symbol, expected",
    [
        (1, "₺", "0.01 ₺"),
        (12345, "₺", "123.45 ₺"),
        (123456, "₺", "1,234.56 ₺"),
        (1234567890, "₺", "12,345,678.90 ₺"),
        (0, "$", "0.00 $"),
        (-1, "€", "-0.01 €"),
        (-1234567890, "£", "-12,345,678.90 £"),
        (35000, "$", "350.00 $"),
        (12345, "", "123.45 "),
    ],
)
def test_format_amount(minor, symbol, expected):
    assert format_amount(minor, symbol) == expected


def test_format_amount_uses_configured_symbol_by_default():
    assert format_amount(12345) == "123.45 ₺"


def test_amount_info_positive():
    info = amount_info(12345, "₺")
    assert info == {
        "raw": Decimal("123.45"),
        "formatted": "123.45 ₺",
        "formatted_minus": "123.45 ₺",
        "type": "positive",
    }


def test_amount_info_negative_keeps_formatted_minus_identical():
    info = amount_info(-12345, "₺")
    assert info["raw"] == Decimal("-123.45")
    assert info["formatted"] == "-123.45 ₺"
    assert info["formatted_minus"] == info["formatted"]
    assert info["type"] == "negative"


def test_amount_info_zero_is_nil():
    info = amount_info(0, "₺")
    assert info["raw"] == 0
    assert info["formatted"] == "0.00 ₺"
    assert info["type"] == "nil"


def test_amount_info_very_large_amount():
    info = amount_info(999999999999, "₺")
    assert info["raw"] == Decimal("9999999999.99")
    assert info["formatted"] == "9,999,999,999.99 ₺"
